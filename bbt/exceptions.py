"""exceptions raised by bbt"""


class BBTError(Exception):
    """base class for all errors raised by this package"""


class RatingUpdateError(BBTError, ValueError):
    """the teams and ranks handed to a rating update were malformed"""


class MismatchedLengthsError(RatingUpdateError):
    """teams and ranks were not the same length"""

    def __init__(self, num_teams: int, num_ranks: int):
        self.num_teams = num_teams
        self.num_ranks = num_ranks
        super().__init__(f'got {num_teams} teams but {num_ranks} ranks')


class EmptyTeamError(RatingUpdateError):
    """the team at team_idx has no players"""

    def __init__(self, team_idx: int):
        self.team_idx = team_idx
        super().__init__(f'team {team_idx} is empty')


class RatingSerializationError(BBTError, ValueError):
    """a serialized rating could not be decoded"""
