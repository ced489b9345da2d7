# File: stylecore/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from stylecore import catalogs
from stylecore.catalogs import StyleCatalogs
from stylecore.common import as_bool, as_dict, as_str
from stylecore.json_store import read_json

log = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


@dataclass
class AppConfig:
    """
    Startup settings. Read once; selections made in the UI are never written back.
    """
    default_font: str = catalogs.DEFAULT_FONT
    default_size: str = catalogs.DEFAULT_SIZE
    default_color: str = catalogs.DEFAULT_COLOR.name
    sample_text: str = "CSE 20"
    theme: str = "light"
    log_level: str = "INFO"
    console_log: bool = False

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AppConfig":
        d = as_dict(d)
        dflt = AppConfig()
        return AppConfig(
            default_font=as_str(d.get("default_font"), dflt.default_font).strip() or dflt.default_font,
            default_size=as_str(d.get("default_size"), dflt.default_size).strip() or dflt.default_size,
            default_color=as_str(d.get("default_color"), dflt.default_color).strip() or dflt.default_color,
            sample_text=as_str(d.get("sample_text"), dflt.sample_text),
            theme=as_str(d.get("theme"), dflt.theme).strip() or dflt.theme,
            log_level=as_str(d.get("log_level"), dflt.log_level).strip().upper() or dflt.log_level,
            console_log=as_bool(d.get("console_log"), dflt.console_log),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_font": self.default_font,
            "default_size": self.default_size,
            "default_color": self.default_color,
            "sample_text": self.sample_text,
            "theme": self.theme,
            "log_level": self.log_level,
            "console_log": bool(self.console_log),
        }

    def resolved_against(self, cats: StyleCatalogs) -> "AppConfig":
        """
        Replace defaults that are not keys of their catalog with the built-in ones.
        """
        font = self.default_font
        if font not in cats.fonts:
            log.warning("default_font %r not in font catalog; using %r", font, catalogs.DEFAULT_FONT)
            font = catalogs.DEFAULT_FONT

        size = self.default_size
        if size not in cats.sizes:
            log.warning("default_size %r not in size catalog; using %r", size, catalogs.DEFAULT_SIZE)
            size = catalogs.DEFAULT_SIZE

        color = self.default_color
        if color not in cats.colors:
            log.warning("default_color %r not in color catalog; using %r", color, catalogs.DEFAULT_COLOR.name)
            color = catalogs.DEFAULT_COLOR.name

        return AppConfig(
            default_font=font,
            default_size=size,
            default_color=color,
            sample_text=self.sample_text,
            theme=self.theme,
            log_level=self.log_level,
            console_log=self.console_log,
        )


def load_config(path: Optional[Path]) -> AppConfig:
    """
    Missing or empty file -> defaults. Invalid JSON raises JsonReadError.
    """
    if path is None:
        return AppConfig()
    return AppConfig.from_dict(read_json(path))
