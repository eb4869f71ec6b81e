"""
CSV Parser Service
Line tokenizing and header/row pairing for bulk record uploads
"""

from typing import List, Dict, Tuple

from placement_portal.logging_config import get_logger

logger = get_logger(__name__)


class CSVParser:
    """Utility for splitting uploaded CSV text into header-keyed rows"""

    @staticmethod
    def decode(file_content: bytes) -> str:
        """
        Decode upload bytes as UTF-8, dropping a BOM.

        Bytes that are not valid UTF-8 (e.g. a Latin-1 export) are dropped,
        so "Jos\xe9" reads as "Jos"; a warning is logged when that happens.
        """
        try:
            return file_content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning("Upload is not valid UTF-8 (%s); undecodable bytes dropped", e.reason)
            return file_content.decode("utf-8-sig", errors="ignore")

    @staticmethod
    def parse_line(line: str) -> List[str]:
        """
        Split one CSV line into fields.

        A double quote toggles quoted mode and is not kept, so commas inside
        quotes stay in the field. Embedded "" is not un-escaped.
        """
        fields = []
        current = []
        in_quotes = False

        for char in line:
            if char == '"':
                in_quotes = not in_quotes
            elif char == "," and not in_quotes:
                fields.append("".join(current))
                current = []
            else:
                current.append(char)

        fields.append("".join(current))
        return fields

    @classmethod
    def split_rows(cls, csv_text: str) -> Tuple[List[str], List[Tuple[int, Dict[str, str]]]]:
        """
        Parse CSV text into a header and numbered rows.

        Blank lines are skipped but still counted, so each row carries its
        physical line number (header line is row 1 for a well-formed file).

        Returns: (headers, [(row_number, {column: value}), ...])
        """
        numbered = [
            (number, line.rstrip("\r"))
            for number, line in enumerate(csv_text.split("\n"), start=1)
            if line.strip()
        ]
        if not numbered:
            return [], []

        _, header_line = numbered[0]
        headers = [h.strip() for h in cls.parse_line(header_line)]

        rows = []
        for row_num, line in numbered[1:]:
            values = cls.parse_line(line)
            row = {
                header: values[index] if index < len(values) else ""
                for index, header in enumerate(headers)
            }
            rows.append((row_num, row))

        return headers, rows
