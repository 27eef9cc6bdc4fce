"""Bidirectional name/code tables loaded from tab-delimited text."""

import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from country_translator.core.errors import ResourceLoadError
from country_translator.data.schemas import (
    COUNTRY_LAYOUT,
    LANGUAGE_LAYOUT,
    CodeEntry,
    CodeTableLayout,
)

logger = logging.getLogger(__name__)

COUNTRY_CODES_RESOURCE = "country-codes.txt"
LANGUAGE_CODES_RESOURCE = "language-codes.txt"


class CodeTable:
    """Resolves display names to short codes and back.

    Both directions are built once from the same lines and never change
    afterwards. Codes are matched case-insensitively, names exactly.
    """

    def __init__(
        self,
        lines: Iterable[Union[str, bytes]],
        layout: CodeTableLayout,
        source: Optional[str] = None,
    ):
        """Build the table from an iterable of text lines.

        Args:
            lines: Lines of the code file, header first (e.g. an open file).
                Byte lines are decoded as UTF-8.
            layout: Field positions of the name and code.
            source: Description of where the lines came from, for errors.

        Raises:
            ResourceLoadError: If reading the lines fails.
        """
        self.layout = layout
        self.source = source
        self._code_to_name: dict[str, str] = {}
        self._name_to_code: dict[str, str] = {}

        try:
            self._load(lines)
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceLoadError(
                f"Error reading codes from {source or 'stream'}: {e}", source
            ) from e

        logger.debug(f"Loaded {len(self._code_to_name)} codes from {source or 'stream'}")

    def _load(self, lines: Iterable[Union[str, bytes]]) -> None:
        """Parse lines into the two mappings."""
        header_seen = False

        for line in lines:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            line = line.strip()
            if not line:
                continue

            if not header_seen:
                header_seen = True
                continue

            parts = line.split("\t")
            if len(parts) < self.layout.min_fields:
                logger.debug(f"Skipping short line: {line!r}")
                continue

            name = parts[self.layout.name_field].strip()
            code = parts[self.layout.code_field].strip().lower()
            if not name or not code:
                continue

            # Later lines overwrite earlier ones
            if code in self._code_to_name and self._code_to_name[code] != name:
                logger.debug(
                    f"Code '{code}' redefined: '{self._code_to_name[code]}' -> '{name}'"
                )
            if name in self._name_to_code and self._name_to_code[name] != code:
                logger.debug(
                    f"Name '{name}' redefined: '{self._name_to_code[name]}' -> '{code}'"
                )
            self._code_to_name[code] = name
            self._name_to_code[name] = code

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        layout: CodeTableLayout,
    ) -> "CodeTable":
        """Load a code table from a UTF-8 text file.

        Args:
            file_path: Path to the tab-delimited file.
            layout: Field positions of the name and code.

        Returns:
            The loaded CodeTable.

        Raises:
            ResourceLoadError: If the file cannot be opened or read.
        """
        path = Path(file_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                table = cls(f, layout, source=str(path))
        except OSError as e:
            raise ResourceLoadError(f"Error reading codes from {path}: {e}", str(path)) from e

        logger.info(f"Loaded {table.count()} codes from: {path}")
        return table

    def name_for_code(self, code: Optional[str]) -> Optional[str]:
        """Get the display name for a code (case-insensitive).

        Args:
            code: The code to look up.

        Returns:
            The display name, or None if the code is unknown or empty.
        """
        if code is None:
            return None
        key = code.strip().lower()
        if not key:
            return None
        return self._code_to_name.get(key)

    def code_for_name(self, name: Optional[str]) -> Optional[str]:
        """Get the code for a display name.

        The name is trimmed but must match the stored name's case exactly.

        Args:
            name: The display name to look up.

        Returns:
            The lowercase code, or None if the name is unknown or empty.
        """
        if name is None:
            return None
        key = name.strip()
        if not key:
            return None
        return self._name_to_code.get(key)

    def count(self) -> int:
        """Number of distinct codes in the table."""
        return len(self._code_to_name)

    def codes(self) -> list[str]:
        """All codes in load order."""
        return list(self._code_to_name)

    def names(self) -> list[str]:
        """Display names of all codes, in load order."""
        return list(self._code_to_name.values())

    def entries(self) -> list[CodeEntry]:
        """One CodeEntry per distinct code."""
        return [
            CodeEntry(display_name=name, code=code)
            for code, name in self._code_to_name.items()
        ]

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.name_for_code(code) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes())

    def __repr__(self) -> str:
        return f"<CodeTable codes={self.count()} source={self.source}>"


def _load_bundled(resource_name: str, layout: CodeTableLayout) -> CodeTable:
    """Load a code table shipped with the package."""
    resource = resources.files("country_translator.resources").joinpath(resource_name)
    try:
        with resource.open("r", encoding="utf-8") as f:
            return CodeTable(f, layout, source=resource_name)
    except OSError as e:
        raise ResourceLoadError(
            f"Error reading bundled codes {resource_name}: {e}", resource_name
        ) from e


def load_country_codes(file_path: Optional[Union[str, Path]] = None) -> CodeTable:
    """Load the country table (name -> alpha-3 code).

    Args:
        file_path: Country code file; the bundled file is used if None.
    """
    if file_path is None:
        return _load_bundled(COUNTRY_CODES_RESOURCE, COUNTRY_LAYOUT)
    return CodeTable.from_file(file_path, COUNTRY_LAYOUT)


def load_language_codes(file_path: Optional[Union[str, Path]] = None) -> CodeTable:
    """Load the language table (name -> alpha-2 code).

    Args:
        file_path: Language code file; the bundled file is used if None.
    """
    if file_path is None:
        return _load_bundled(LANGUAGE_CODES_RESOURCE, LANGUAGE_LAYOUT)
    return CodeTable.from_file(file_path, LANGUAGE_LAYOUT)
