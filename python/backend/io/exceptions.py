class BoardFormatError(Exception):
    pass


class MissingTilesError(BoardFormatError):
    pass


class InvalidTokenError(BoardFormatError):
    pass


class InvalidBoardError(BoardFormatError):
    pass
