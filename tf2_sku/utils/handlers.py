from tf2_sku.decoders.sku_decoder import SkuDecoder
from tf2_sku.errors import ParseError
from tf2_sku.models.sku import Sku
from typing import List, Iterable, Iterator
import logging

logger = logging.getLogger(__name__)

_sku_decoder = SkuDecoder()


def decode_strict(text: str) -> Sku:
    """Parse a SKU string, raising ParseError if any value is invalid."""
    return _sku_decoder.decode_record(text)


def decode_lenient(text: str) -> Sku:
    """Parse a SKU string, skipping whatever fails. Never raises."""
    return _sku_decoder.decode_lenient(text)


def parse_attribute(sku: Sku, token: str) -> None:
    """Apply a single attribute token such as "kt-3" to an existing SKU."""
    _sku_decoder.parse_attribute(sku, token)


def decode_skus(texts: Iterable[str], strict: bool = False, skip_invalid: bool = True) -> List[Sku]:
    """
    Decode a batch of SKU strings.

    Uses the module-level singleton decoder to avoid repeated initialization.
    In strict mode invalid strings are logged and left out when skip_invalid
    is set, otherwise the first ParseError propagates.
    """
    return list(decode_skus_iter(texts, strict=strict, skip_invalid=skip_invalid))


def decode_skus_iter(texts: Iterable[str], strict: bool = False, skip_invalid: bool = True) -> Iterator[Sku]:
    """
    Decode SKU strings lazily and yield them one by one.
    This avoids materializing the entire list before exporting.
    """
    for text in texts:
        if not strict:
            yield _sku_decoder.decode_lenient(text)
            continue

        try:
            yield _sku_decoder.decode_record(text)
        except ParseError as error:
            if not skip_invalid:
                raise
            logger.warning("Skipping invalid SKU %r: %s", text, error)
