"""Request assembly for setlist.fm endpoints.

Where: src/setlistfm/features/dispatch/usecases/request_builder.py
What: Turn an endpoint descriptor plus caller context into a ready GET request.
Why: Keep URL escaping and header rules in one pure, network-free function.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final
from urllib.parse import quote, urlencode, urlsplit

from setlistfm.config.settings import (
    ACCEPT_HEADER,
    ACCEPT_JSON,
    API_BASE_URL,
    API_KEY_HEADER,
    LANGUAGE_HEADER,
)
from setlistfm.shared.errors import SetlistFMError
from setlistfm.shared.language import Language

from ..domain.descriptor import EndpointDescriptor
from ..domain.prepared_request import PreparedRequest
from .ports import Transport

# Characters left literal in the path: RFC 3986 pchar plus "/" and existing escapes.
_PATH_SAFE: Final[str] = "/:@!$&'()*+,;=%"
# Query sub-delimiters a URL-components encoder leaves untouched.
_QUERY_SAFE: Final[str] = "/:@!$'()*+,;?"
_UNPARSEABLE_PATH: Final[re.Pattern[str]] = re.compile(r"[\s\x00-\x1f\x7f]")


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Credential, language, and transport shared by every call of a client."""

    api_key: str
    language: Language
    transport: Transport


def escape_path(path: str) -> str:
    """Validate ``path`` as a relative URL reference and percent-encode it.

    Raises:
        SetlistFMError: With code ``0`` when the path cannot be parsed.
    """

    if _UNPARSEABLE_PATH.search(path):
        raise SetlistFMError.invalid_endpoint()
    try:
        parts = urlsplit(path)
        _ = parts.port
    except ValueError as exc:
        raise SetlistFMError.invalid_endpoint() from exc
    return quote(path, safe=_PATH_SAFE)


def encode_query(pairs: list[tuple[str, str]]) -> str:
    """Percent-encode query pairs, then escape every literal ``+`` as ``%2B``.

    The API decodes ``+`` as a space, so the replacement runs over the whole
    encoded string rather than per value.
    """

    encoded = urlencode(pairs, quote_via=quote, safe=_QUERY_SAFE)
    return encoded.replace("+", "%2B")


def build_request(descriptor: EndpointDescriptor, context: RequestContext) -> PreparedRequest:
    """Assemble the GET request for ``descriptor``.

    Empty-string parameters are omitted; the URL carries no ``?`` when no
    parameter survives.

    Raises:
        SetlistFMError: With code ``0`` and ``"Provided endpoint is not valid"``
            when the descriptor path is not a valid URL component.
    """

    url = API_BASE_URL + escape_path(descriptor.path)
    query = encode_query(descriptor.supplied_parameters())
    if query:
        url = f"{url}?{query}"

    headers = {
        API_KEY_HEADER: context.api_key,
        ACCEPT_HEADER: ACCEPT_JSON,
        LANGUAGE_HEADER: context.language.code,
    }
    return PreparedRequest(url=url, headers=headers, method="GET")


__all__ = [
    "RequestContext",
    "build_request",
    "encode_query",
    "escape_path",
]
