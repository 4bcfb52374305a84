"""math utility functions for rating systems"""
from scipy.special import expit


def sigmoid(x):
    """logistic function, works on scalars and arrays and does not overflow for large |x|"""
    return expit(x)
