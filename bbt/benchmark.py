"""time rating updates, run with python -m bbt.benchmark"""
import logging
import sys
import time
from bbt.core.base import Outcome
from bbt.models.weng_lin_bradley_terry import WengLinBradleyTerry
from bbt.rating import Rating

logger = logging.getLogger(__name__)


def hundred_duels(rater):
    """rate 100 duels between two default players, the ratings are not carried forward"""
    p1 = Rating.default()
    p2 = Rating.default()
    for _ in range(100):
        rater.duel(p1, p2, Outcome.WIN)


def team_game(rater, num_teams=8, team_size=4):
    """rate one game of num_teams teams with team_size default players each, all finishing in order"""
    teams = [[Rating.default() for _ in range(team_size)] for _ in range(num_teams)]
    ranks = list(range(1, num_teams + 1))
    rater.update_ratings(teams, ranks)


def time_it(func, rater, repeats=20):
    """best wall time in seconds over repeats calls"""
    best = float('inf')
    for _ in range(repeats):
        start = time.perf_counter()
        func(rater)
        best = min(best, time.perf_counter() - start)
    return best


def run_benchmark():
    benchmarks = {
        'hundred_duels': hundred_duels,
        'team_game': team_game,
    }
    results = {}
    for update_method in ['batched', 'iterative']:
        rater = WengLinBradleyTerry(update_method=update_method)
        for name, func in benchmarks.items():
            seconds = time_it(func, rater)
            results[(update_method, name)] = seconds
            logger.info('%-10s%-16s: %.3f ms', update_method, name, seconds * 1e3)
    return results


if __name__ == '__main__':
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(stream_handler)
    logger.setLevel(logging.INFO)
    run_benchmark()
