import logging
import sys
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Directorio de logs (backend/logs/)
_LOG_DIR = Path(__file__).parent.parent.parent / "logs"

# Símbolos para visualizar el flujo
FLOW_SYMBOLS = {
    "start": "╔",
    "node": "║",
    "arrow": "→",
    "end": "╚",
    "route": "◆",
}


def _configure_root_logger(level: LogLevel, log_to_file: bool) -> None:
    """Configura el logger raíz con handlers de consola y archivo."""
    root = logging.getLogger()
    if root.handlers:
        return

    # Silenciar loggers ruidosos de terceros
    noisy_loggers = [
        "watchfiles",
        "watchfiles.main",
        "httpx",
        "httpcore",
        "uvicorn.access",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    # Handler de consola (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
    root.setLevel(level)

    if not log_to_file:
        return

    # Handler de archivo con rotación diaria (mantiene 7 días)
    try:
        _LOG_DIR.mkdir(exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            _LOG_DIR / "supplier_evaluation.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    except OSError as e:
        # Sin archivo seguimos solo con consola
        root.warning(f"File logging disabled: {e}")
        return

    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Retorna un logger configurado para el módulo especificado.

    Uso:
        from app.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Mensaje")
    """
    from app.core.config import settings

    _configure_root_logger(settings.log_level, settings.log_to_file)
    return logging.getLogger(name)


class EvaluationLogger:
    """Logger especializado para trazabilidad de corridas de evaluación."""

    def __init__(self, run_name: str):
        self._logger = get_logger(f"evaluation.{run_name}")
        self.run_name = run_name

    def run_start(self, kind: str, cohort_size: int, trace_id: str | None = None) -> None:
        """Log inicio de una corrida sobre la cohorte."""
        self._logger.info("=" * 70)
        self._logger.info(f"{FLOW_SYMBOLS['start']}══ {kind.upper()} RUN START ══════════════════════════════════════")
        self._logger.info(f"{FLOW_SYMBOLS['node']} Cohort size: {cohort_size}")
        if trace_id:
            self._logger.info(f"{FLOW_SYMBOLS['node']} Trace: {trace_id}")

    def run_end(self, kind: str, summary: dict) -> None:
        """Log fin de la corrida con resumen."""
        self._logger.info(f"{FLOW_SYMBOLS['end']}══ {kind.upper()} RUN COMPLETE ═══════════════════════════════════")
        for key, value in summary.items():
            self._logger.info(f"   {FLOW_SYMBOLS['route']} {key}: {value}")
        self._logger.info("=" * 70)

    def stage(self, stage: str, result: str | None = None) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [{stage.upper()}] {FLOW_SYMBOLS['arrow']} {result or 'OK'}")

    def supplier_result(self, supplier: str, result: str) -> None:
        """Log del resultado individual de un proveedor."""
        self._logger.info(f"{FLOW_SYMBOLS['node']} {supplier} {FLOW_SYMBOLS['arrow']} {result}")

    def weight_warning(self, unknown_ids: list[str]) -> None:
        """Log de criterios de la matriz que no corresponden a ninguna métrica."""
        self._logger.warning(
            f"{FLOW_SYMBOLS['route']} WEIGHTS: ignoring unknown criteria {unknown_ids}"
        )

    def error(self, stage: str, error: Exception) -> None:
        self._logger.error(f"{FLOW_SYMBOLS['node']} [{stage.upper()}] ERROR: {type(error).__name__}: {error}", exc_info=True)
