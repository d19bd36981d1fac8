"""
Config Package - Environment names va engine settings

Bao gồm:
- paths: Tên app và CHARFREQ_* environment variables
- engine_settings: EngineSettings dataclass

Không re-export ở đây: logging_config import config.paths,
engine_settings lại import logging_config.
"""
