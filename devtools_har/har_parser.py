"""
devtools_har/har_parser.py

Entry points for reading HAR documents from text or files.
"""

import json
from pathlib import Path
from typing import ClassVar

from devtools_har.data_models.base.har_root import HarRoot
from devtools_har.data_models.devtools.devtools_har_root import DevToolsHarRoot
from devtools_har.utils.har_utils import expect
from devtools_har.utils.logger import get_logger

logger = get_logger(name=__name__)


class HarParser:
    """
    Parses HAR JSON into the typed model tree.

    Invalid JSON text raises json.JSONDecodeError. Structurally malformed HAR
    is defaulted unless strict parsing is on (see utils.har_utils.expect).
    """
    # model used for the top-level document
    ROOT_MODEL: ClassVar[type[HarRoot]] = HarRoot

    @classmethod
    def parse(cls, text: str | bytes) -> HarRoot:
        """
        Parse a HAR document.
        Args:
            text: The JSON text.
        Returns:
            HarRoot: The document, as an instance of ROOT_MODEL.
        """
        decoded = json.loads(text)
        expect(
            isinstance(decoded, dict),
            f"HAR document must be a JSON object, got {type(decoded).__name__}",
        )
        root = cls.ROOT_MODEL.from_json(decoded if isinstance(decoded, dict) else {})
        logger.debug(
            "Parsed %s with %d entries and %d pages",
            cls.ROOT_MODEL.__name__,
            len(root.log.entries),
            len(root.log.pages),
        )
        return root

    @classmethod
    def parse_file(cls, path: str | Path) -> HarRoot:
        """
        Read and parse a HAR file (UTF-8, a leading BOM is tolerated).
        Raises:
            OSError: If the file cannot be read.
        """
        path = Path(path)
        logger.debug("Reading HAR file %s", path)
        return cls.parse(path.read_text(encoding="utf-8-sig"))


class DevToolsHarParser(HarParser):
    """
    Parses HAR exported by browser DevTools, keeping the DevTools fields typed.
    """
    ROOT_MODEL: ClassVar[type[HarRoot]] = DevToolsHarRoot
