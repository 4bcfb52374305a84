"""
Models Module
=============

This module contains the rating systems which turn the result of one finished game into new player ratings.

Included Rating Systems:
- Weng-Lin Bradley-Terry: the Bayesian online rating system of Weng and Lin using the Bradley-Terry (logistic) model,
  rating any number of teams of any size with ties.

Each rating system is a subclass of bbt.core.base.OnlineRatingSystem, so every one of them accepts games in the same
shape, validates them the same way and offers the same two player duel shortcut.
"""
