"""
Utilitários compartilhados do cliente Transmission.
"""

import base64
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, List, Callable


# FUNÇÕES DE ARQUIVO

def encode_metainfo(filepath: Path) -> str:
    """Le um arquivo .torrent e devolve o conteudo em base64."""
    with open(filepath, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii")


def parse_ids(texto: str) -> List[int]:
    """Converte '1,2, 5' em [1, 2, 5]."""
    return [int(parte) for parte in texto.split(",") if parte.strip()]


def format_bytes(valor: float) -> str:
    """Formata bytes em unidade legivel."""
    for unidade in ("B", "KB", "MB", "GB", "TB"):
        if abs(valor) < 1024 or unidade == "TB":
            return f"{valor:.1f} {unidade}"
        valor /= 1024
    return f"{valor:.1f} TB"


# LOGGER

class TransmissionLogger:
    """Logger customizado para o cliente Transmission."""

    _instances = {}
    _callbacks: List[Callable[[str, str], None]] = []

    def __new__(cls, name: str = "transmission", log_dir: Optional[Path] = None, debug: bool = False):
        # Singleton por nome
        if name not in cls._instances:
            instance = super().__new__(cls)
            cls._instances[name] = instance
        return cls._instances[name]

    def __init__(self, name: str = "transmission", log_dir: Optional[Path] = None, debug: bool = False):
        if hasattr(self, '_initialized'):
            return
        self._initialized = True

        self.name = name
        self.debug_mode = debug

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug else logging.INFO)
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.DEBUG if debug else logging.WARNING)
        console.setFormatter(formatter)
        self.logger.addHandler(console)

        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                log_dir / f"transmission_{datetime.now().strftime('%Y%m%d')}.log",
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    @classmethod
    def add_callback(cls, callback: Callable[[str, str], None]):
        """Adiciona callback para receber mensagens de log."""
        cls._callbacks.append(callback)

    @classmethod
    def remove_callback(cls, callback: Callable[[str, str], None]):
        """Remove callback."""
        if callback in cls._callbacks:
            cls._callbacks.remove(callback)

    def _notify_callbacks(self, level: str, msg: str):
        for callback in list(self._callbacks):
            try:
                callback(level, msg)
            except Exception:
                self.logger.exception(f"Falha no callback de log {callback!r}")

    def info(self, msg: str):
        self.logger.info(msg)
        self._notify_callbacks("INFO", msg)

    def debug(self, msg: str):
        self.logger.debug(msg)
        self._notify_callbacks("DEBUG", msg)

    def warning(self, msg: str):
        self.logger.warning(msg)
        self._notify_callbacks("WARNING", msg)

    def error(self, msg: str):
        self.logger.error(msg)
        self._notify_callbacks("ERROR", msg)

    def success(self, msg: str):
        self.logger.info(f"[OK] {msg}")
        self._notify_callbacks("SUCCESS", f"[OK] {msg}")


def get_logger(name: str = "transmission", log_dir: Optional[Path] = None, debug: bool = False) -> TransmissionLogger:
    """Obtém instância do logger."""
    return TransmissionLogger(name, log_dir, debug)
