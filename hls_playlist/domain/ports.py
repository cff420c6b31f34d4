from abc import ABC, abstractmethod
from pymonad.either import Either

from .errors import PlaylistIOError


class PlaylistStore(ABC):
    """
    Port defining the contract for reading and writing playlist text.
    """

    @abstractmethod
    def read(self, location: str) -> Either[PlaylistIOError, str]:
        """
        Reads the playlist stored at location.

        Returns:
            Either: A Right(text) or a Left(PlaylistIOError).
        """
        pass

    @abstractmethod
    def write(self, location: str, text: str) -> Either[PlaylistIOError, str]:
        """
        Stores text at location.

        Returns:
            Either: A Right(location) or a Left(PlaylistIOError).
        """
        pass
