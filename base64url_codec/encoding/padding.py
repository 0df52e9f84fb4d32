"""Base64url padding restoration.

Base64url text is usually transmitted without '=' padding, but standard
base64 decoders require the length to be a multiple of 4.
"""

import logging

from base64url_codec.exceptions import InvalidLengthError
from base64url_codec.interfaces.encoding import IPaddingRestorer

logger = logging.getLogger(__name__)


class Base64UrlPadding(IPaddingRestorer):
    """Restores '=' padding on base64url text."""

    @staticmethod
    def add_padding(base64url: str) -> str:
        """Pad base64url text to a length multiple of 4.

        A remainder of 2 gets '==', a remainder of 3 gets '=', and a
        remainder of 0 is returned unchanged. A remainder of 1 can never be
        produced by an encoder, so it is rejected.

        Args:
            base64url: The base64url text to pad.

        Returns:
            The padded text.

        Raises:
            InvalidLengthError: If the length modulo 4 is 1.

        Example:
            >>> Base64UrlPadding.add_padding("YQ")
            'YQ=='
        """
        remainder = len(base64url) % 4

        if remainder == 1:
            logger.debug("rejected base64url text of length %d", len(base64url))
            raise InvalidLengthError(
                f"illegal base64url length {len(base64url)}: length modulo 4 is 1"
            )

        if remainder == 0:
            return base64url

        return base64url + "=" * (4 - remainder)
