"""base class for online team rating systems"""
import enum
import logging
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple
from bbt.exceptions import EmptyTeamError, MismatchedLengthsError
from bbt.rating import Rating

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """result of a head to head game from the first player's perspective"""

    WIN = 'win'
    LOSS = 'loss'
    DRAW = 'draw'


DUEL_RANKS = {
    Outcome.WIN: (1, 2),
    Outcome.LOSS: (2, 1),
    Outcome.DRAW: (1, 1),
}


class OnlineRatingSystem(ABC):
    """
    Base class for online rating systems which rate one finished game at a time.

    A game is a sequence of teams, each team a non empty sequence of Ratings, along with a rank
    for every team. Lower ranks finished better and equal ranks are ties; only the relative order
    of ranks matters. This class validates the input and handles the trivial cases, subclasses
    implement rate_teams which holds the actual update math.

    Implementations hold only configuration, all per game state lives inside a call, so a single
    instance can be shared between threads.
    """

    def update_ratings(self, teams: Sequence[Sequence[Rating]], ranks: Sequence[float]) -> List[List[Rating]]:
        """
        Computes the new ratings of every player after one game.

        Parameters:
            teams (sequence of sequences of Rating): the players of each team
            ranks (sequence of numbers): the finishing position of each team, lower is better

        Returns:
            list of lists of Rating: new ratings in the same shape as teams, the inputs are not modified

        Raises:
            MismatchedLengthsError: teams and ranks have different lengths
            EmptyTeamError: one of the teams has no players
        """
        teams = [list(team) for team in teams]
        ranks = list(ranks)
        if len(teams) != len(ranks):
            raise MismatchedLengthsError(len(teams), len(ranks))
        for team_idx, team in enumerate(teams):
            if not team:
                raise EmptyTeamError(team_idx)

        if len(teams) < 2:
            # with nobody to compare against nothing changes
            logger.debug('got %d teams, returning ratings unchanged', len(teams))
            return teams

        logger.debug('rating game with %d teams and %d players', len(teams), sum(len(team) for team in teams))
        return self.rate_teams(teams, ranks)

    @abstractmethod
    def rate_teams(self, teams: List[List[Rating]], ranks: List[float]) -> List[List[Rating]]:
        """
        Rates a validated game with at least two teams, none of them empty.

        Parameters:
            teams (list of lists of Rating): the players of each team
            ranks (list of numbers): the finishing position of each team, same length as teams
        """
        raise NotImplementedError

    def duel(self, p1: Rating, p2: Rating, outcome: Outcome) -> Tuple[Rating, Rating]:
        """
        Rates a game between two single players.

        Parameters:
            p1 (Rating): the first player
            p2 (Rating): the second player
            outcome (Outcome): WIN if p1 won, LOSS if p2 won, DRAW otherwise

        Returns:
            tuple of Rating: the new ratings of p1 and p2
        """
        ranks = DUEL_RANKS[Outcome(outcome)]
        (new_p1,), (new_p2,) = self.update_ratings([[p1], [p2]], ranks)
        return new_p1, new_p2
