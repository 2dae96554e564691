"""Demo window hosting a single weight scale."""

from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import Optional

from PySide6 import QtCore, QtWidgets

from . import __version__ as APP_VERSION
from .logging_config import resolve_level, setup_logging
from .models import AppConfig
from .widget import ScaleWidget

logger = logging.getLogger(__name__)


def config_path() -> Path:
    return Path.home() / ".weight_picker_config.json"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read the demo settings, falling back to defaults when unusable."""
    p = path or config_path()
    if not p.exists():
        return AppConfig()
    try:
        cfg = AppConfig.from_json(p.read_text(encoding="utf-8"))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring config %s: %s", p, exc)
        return AppConfig()
    if resolve_level(cfg.log_level) is None:
        logger.warning("unknown log_level %r in %s, using INFO", cfg.log_level, p)
        cfg.log_level = "INFO"
    return cfg


class MainWindow(QtWidgets.QWidget):
    def __init__(self, cfg: AppConfig) -> None:
        super().__init__(None)
        self.setWindowTitle(f"Weight Picker {APP_VERSION}")
        self.resize(480, 720)

        self.weight_label = QtWidgets.QLabel(self)
        self.weight_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        font = self.weight_label.font()
        font.setPointSize(28)
        font.setBold(True)
        self.weight_label.setFont(font)

        self.scale = ScaleWidget(
            style=cfg.style,
            weight_range=cfg.weight_range,
            density=cfg.density,
            parent=self,
        )
        self.scale.weightChanged.connect(self.set_weight)
        self.set_weight(self.scale.weight())

        v = QtWidgets.QVBoxLayout(self)
        v.addWidget(self.weight_label, stretch=0)
        v.addWidget(self.scale, stretch=1)

    def set_weight(self, weight: int) -> None:
        self.weight_label.setText(str(weight))


def main() -> None:
    setup_logging()
    cfg = load_config()
    setup_logging(cfg.log_level)
    logger.info("starting weight_picker %s with %s", APP_VERSION, cfg.weight_range)

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("weight_picker")
    app.setApplicationVersion(APP_VERSION)

    window = MainWindow(cfg)
    window.show()
    sys.exit(app.exec())

