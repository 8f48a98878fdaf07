from typing import Iterator, Tuple


class SkuFileReader:
    """Reads SKU strings from a text file, one per line.

    Blank lines and lines starting with '#' are skipped.
    """

    COMMENT_PREFIX = "#"

    def __init__(self, file_path: str, encoding: str = "utf-8"):
        self.file_path = file_path
        self.encoding = encoding

    def read_skus(self) -> Iterator[str]:
        """Yield SKU strings lazily, without loading the whole file."""
        for _, text in self.read_numbered():
            yield text

    def read_numbered(self) -> Iterator[Tuple[int, str]]:
        """Yield (line number, SKU string) pairs, line numbers starting at 1."""
        with open(self.file_path, "r", encoding=self.encoding) as file:
            for line_number, line in enumerate(file, start=1):
                text = line.strip()
                if not text or text.startswith(self.COMMENT_PREFIX):
                    continue
                yield line_number, text
