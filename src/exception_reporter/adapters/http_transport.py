"""Blocking HTTP transport built on urllib.

HTTP error statuses still return their body: the Bot API explains rejections
in JSON, and the client decides success from that JSON alone. Connection
failures and timeouts raise and are contained by the client.
"""

from __future__ import annotations

import urllib.error
import urllib.parse
import urllib.request
from typing import Mapping

from exception_reporter.core.ports import HttpResponse


class UrllibTransport:
    """Form-encoded POST via ``urllib.request``."""

    def post_form(self, url: str, fields: Mapping[str, str], timeout: float) -> HttpResponse:
        data = urllib.parse.urlencode(fields).encode("utf-8")
        request = urllib.request.Request(url, data=data, method="POST")
        request.add_header("Content-Type", "application/x-www-form-urlencoded")
        try:
            with urllib.request.urlopen(request, timeout=timeout) as response:
                return HttpResponse(status=response.status, body=response.read())
        except urllib.error.HTTPError as e:
            return HttpResponse(status=e.code, body=e.read())
