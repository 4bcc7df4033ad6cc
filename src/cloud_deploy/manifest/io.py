# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Scoped acquisition and parsing of runtime manifest documents."""

from __future__ import annotations

import logging
import os
import ssl
import urllib.request
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, cast
from xml.etree.ElementTree import Element

from defusedxml import ElementTree as DefusedET

from ..config import ManifestSettings
from ..types import ManifestSource

LOGGER = logging.getLogger(__name__)


def _open_url(uri: str, *, user_agent: str) -> BinaryIO:
    """Open ``uri`` for reading using a TLS-verifying opener.

    Args:
        uri: HTTP(S) address of the manifest document.
        user_agent: Value sent in the ``User-Agent`` header.

    Returns:
        BinaryIO: Response stream positioned at the start of the body.
    """

    request = urllib.request.Request(uri, headers={"User-Agent": user_agent})
    opener = urllib.request.build_opener(urllib.request.HTTPSHandler(context=ssl.create_default_context()))
    return cast(BinaryIO, opener.open(request))


class ManifestDocumentSource:
    """Context manager owning the stream a manifest document is read from.

    A file path or the configured network address is opened on entry and
    closed exactly once; :meth:`close` is idempotent. Streams supplied by the
    caller are read but left open because the caller owns them.
    """

    def __init__(self, source: ManifestSource | None = None, *, settings: ManifestSettings | None = None) -> None:
        self._source = source
        self._settings = settings or ManifestSettings()
        self._stream: BinaryIO | None = None
        self._owned = False
        self._closed = False

    @property
    def closed(self) -> bool:
        """Return ``True`` once the source has been released."""

        return self._closed

    @property
    def description(self) -> str:
        """Return a human-readable description of where the document comes from."""

        if self._source is None:
            return self._settings.manifest_uri
        if isinstance(self._source, (str, os.PathLike)):
            return str(self._source)
        return "<stream>"

    def open(self) -> BinaryIO:
        """Acquire the underlying stream, opening it on first use.

        Returns:
            BinaryIO: Stream positioned at the manifest document.

        Raises:
            ValueError: If the source has already been closed.
        """

        if self._closed:
            raise ValueError("manifest source is closed")
        if self._stream is not None:
            return self._stream
        LOGGER.debug("reading runtime manifest from %s", self.description)
        if self._source is None:
            self._stream = _open_url(self._settings.manifest_uri, user_agent=self._settings.user_agent)
            self._owned = True
        elif isinstance(self._source, (str, os.PathLike)):
            self._stream = Path(self._source).open("rb")
            self._owned = True
        else:
            self._stream = self._source
            self._owned = False
        return self._stream

    def close(self) -> None:
        """Release the stream; repeated calls are no-ops."""

        if self._closed:
            return
        self._closed = True
        stream, self._stream = self._stream, None
        if stream is not None and self._owned:
            stream.close()

    def __enter__(self) -> BinaryIO:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def parse_manifest(stream: BinaryIO) -> Element:
    """Parse ``stream`` into an element tree and return its root.

    Entity expansion and external references are refused by ``defusedxml``.
    Parse errors propagate unchanged.
    """

    tree = DefusedET.parse(stream)
    return cast(Element, tree.getroot())


def load_manifest_document(
    source: ManifestSource | None = None,
    *,
    settings: ManifestSettings | None = None,
) -> Element:
    """Read and parse a manifest, releasing the stream on every exit path.

    Args:
        source: File path or open binary stream; ``None`` selects the
            configured network address.
        settings: Settings supplying the network address and user agent.

    Returns:
        Element: Root element of the parsed manifest.
    """

    with ManifestDocumentSource(source, settings=settings) as stream:
        return parse_manifest(stream)


__all__ = [
    "ManifestDocumentSource",
    "load_manifest_document",
    "parse_manifest",
]
