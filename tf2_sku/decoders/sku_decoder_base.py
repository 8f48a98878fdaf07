from abc import ABC, abstractmethod
import logging
from tf2_sku.models.sku import Sku


class SkuDecoderBase(ABC):
    def __init__(self) -> None:
        # Initialize a per-instance logger; subclasses should call super().__init__()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def decode_record(self, text: str) -> Sku:
        pass

    @abstractmethod
    def decode_lenient(self, text: str) -> Sku:
        pass
