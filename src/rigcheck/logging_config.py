"""
日志配置 - Logging Configuration
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "rigcheck"


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """
    配置 rigcheck 日志 - Configure the rigcheck logger

    参数 Parameters:
        level: DEBUG / INFO / WARNING / ERROR / CRITICAL
        verbose: 输出时间、模块和行号
                 Include timestamp, module and line number

    返回 Returns:
        已配置的 rigcheck 根日志器
        The configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    if verbose:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    else:
        fmt = "[RigCheck] %(levelname)s - %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    return logger
