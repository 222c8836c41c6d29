#!/usr/bin/env python3
"""
🔥 Emoji Banner - Configuration Module
======================================
Copyright (c) 2025 PNGN-Tec LLC

Centralized Configuration System
=================================
Complete configuration for emoji banner rendering including:
- Width calculation cache limits
- Rendering defaults (emoji, font, mode, theme, seed)
- Animation defaults (frame delay, fallback terminal width)
- Logging level and debug switch

Configuration Overview
======================
Each concern lives in its own dataclass with a validate() method that
raises ValueError on impossible values. BannerSystemConfig aggregates them
and ConfigurationManager holds the single process-wide instance, applying
EMOJI_BANNER_* environment overrides on start-up and on reload.

Environment Overrides
=====================
- EMOJI_BANNER_CACHE_SIZE       width cache entry count
- EMOJI_BANNER_CACHE_MEMORY     width cache memory in MB
- EMOJI_BANNER_FONT             default font identifier
- EMOJI_BANNER_EMOJI            default foreground emoji
- EMOJI_BANNER_SPEED            default frame delay in milliseconds
- EMOJI_BANNER_TERMINAL_WIDTH   width used when the terminal reports none
- EMOJI_BANNER_WIDTH_STRATEGY   'heuristic' or 'wcwidth'
- EMOJI_BANNER_LOG_LEVEL        logging level name
- EMOJI_BANNER_DEBUG            true/1/yes enables debug mode
"""

import threading
import logging
import os
from typing import Optional
from dataclasses import dataclass, field

# Configure logging
logger = logging.getLogger('banner_config')

# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_EMOJI = '🔥'
DEFAULT_FONT = 'banner'
DEFAULT_SPEED_MS = 100
FALLBACK_TERMINAL_WIDTH = 80

RENDER_MODES = ('solid', 'cycle', 'theme')
WIDTH_STRATEGIES = ('heuristic', 'wcwidth')
OUTPUT_FORMATS = ('text', 'slack')

# ============================================================================
# CACHE CONFIGURATION
# ============================================================================

@dataclass
class CacheConfig:
    """
    Width cache configuration.

    Attributes:
        default_size: Maximum number of cached strings
        max_memory_mb: Memory bound for cached strings
        enable_caching: Master switch for caching
    """

    default_size: int = 512
    max_memory_mb: float = 10.0
    enable_caching: bool = True

    def validate(self) -> bool:
        """Validate cache configuration"""
        if self.default_size <= 0:
            raise ValueError("Cache size must be positive")
        if self.max_memory_mb <= 0:
            raise ValueError("Cache memory limit must be positive")
        return True


# ============================================================================
# RENDERING CONFIGURATION
# ============================================================================

@dataclass
class RenderDefaults:
    """Defaults applied when the caller leaves a rendering option unset"""

    emoji: str = DEFAULT_EMOJI
    font: str = DEFAULT_FONT
    mode: str = 'solid'
    theme: str = 'default'
    seed: int = 0

    # Pixel height for TrueType rasterization
    ttf_pixel_height: int = 16

    width_strategy: str = 'heuristic'

    def validate(self) -> bool:
        """Validate rendering defaults"""
        if not self.emoji:
            raise ValueError("Default emoji must not be empty")
        if not self.font:
            raise ValueError("Default font must not be empty")
        if self.mode not in RENDER_MODES:
            raise ValueError(f"Render mode must be one of {RENDER_MODES}")
        if self.ttf_pixel_height <= 0:
            raise ValueError("TrueType pixel height must be positive")
        if self.width_strategy not in WIDTH_STRATEGIES:
            raise ValueError(f"Width strategy must be one of {WIDTH_STRATEGIES}")
        return True


# ============================================================================
# ANIMATION CONFIGURATION
# ============================================================================

@dataclass
class AnimationDefaults:
    """Marquee timing and terminal fallback"""

    speed_ms: int = DEFAULT_SPEED_MS
    fallback_terminal_width: int = FALLBACK_TERMINAL_WIDTH

    def validate(self) -> bool:
        """Validate animation defaults"""
        if self.speed_ms < 1:
            raise ValueError("Animation speed must be at least 1ms")
        if self.fallback_terminal_width < 1:
            raise ValueError("Fallback terminal width must be positive")
        return True


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

@dataclass
class BannerSystemConfig:
    """Complete system configuration"""

    # Sub-configurations
    cache: CacheConfig = field(default_factory=CacheConfig)
    rendering: RenderDefaults = field(default_factory=RenderDefaults)
    animation: AnimationDefaults = field(default_factory=AnimationDefaults)

    # System-wide settings
    debug_mode: bool = False
    log_level: str = "INFO"

    def validate(self) -> bool:
        """Validate entire configuration"""
        self.cache.validate()
        self.rendering.validate()
        self.animation.validate()
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return True


# ============================================================================
# CONFIGURATION MANAGER (SINGLETON)
# ============================================================================

class ConfigurationManager:
    """
    Singleton configuration manager with runtime reloading.
    Thread-safe management of global configuration.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config = BannerSystemConfig()
        self._config_lock = threading.RLock()
        self._load_environment_overrides(self._config)

        self._initialized = True
        logger.info("Configuration manager initialized")

    @staticmethod
    def _load_environment_overrides(config: BannerSystemConfig):
        """Load configuration overrides from environment variables"""

        # Cache settings
        if 'EMOJI_BANNER_CACHE_SIZE' in os.environ:
            config.cache.default_size = int(os.environ['EMOJI_BANNER_CACHE_SIZE'])
        if 'EMOJI_BANNER_CACHE_MEMORY' in os.environ:
            config.cache.max_memory_mb = float(os.environ['EMOJI_BANNER_CACHE_MEMORY'])

        # Rendering settings
        if 'EMOJI_BANNER_FONT' in os.environ:
            config.rendering.font = os.environ['EMOJI_BANNER_FONT']
        if 'EMOJI_BANNER_EMOJI' in os.environ:
            config.rendering.emoji = os.environ['EMOJI_BANNER_EMOJI']
        if 'EMOJI_BANNER_WIDTH_STRATEGY' in os.environ:
            config.rendering.width_strategy = os.environ['EMOJI_BANNER_WIDTH_STRATEGY'].lower()

        # Animation settings
        if 'EMOJI_BANNER_SPEED' in os.environ:
            config.animation.speed_ms = int(os.environ['EMOJI_BANNER_SPEED'])
        if 'EMOJI_BANNER_TERMINAL_WIDTH' in os.environ:
            config.animation.fallback_terminal_width = int(os.environ['EMOJI_BANNER_TERMINAL_WIDTH'])

        # Logging
        if 'EMOJI_BANNER_LOG_LEVEL' in os.environ:
            config.log_level = os.environ['EMOJI_BANNER_LOG_LEVEL'].upper()
        if 'EMOJI_BANNER_DEBUG' in os.environ:
            config.debug_mode = os.environ['EMOJI_BANNER_DEBUG'].lower() in ('true', '1', 'yes')

    @property
    def config(self) -> BannerSystemConfig:
        """Get current configuration"""
        with self._config_lock:
            return self._config

    def reload(self, new_config: Optional[BannerSystemConfig] = None) -> bool:
        """
        Reload configuration.

        Args:
            new_config: New configuration to apply (rebuilds from env if None)

        Returns:
            True if reload successful
        """
        with self._config_lock:
            old_config = self._config

            try:
                if new_config is None:
                    new_config = BannerSystemConfig()
                    self._load_environment_overrides(new_config)
                new_config.validate()
                self._config = new_config

                logger.info("Configuration reloaded successfully")
                return True

            except ValueError as e:
                logger.error(f"Configuration reload failed: {e}")
                self._config = old_config
                return False


# ============================================================================
# PUBLIC API FUNCTIONS
# ============================================================================

_manager = ConfigurationManager()

def get_config() -> BannerSystemConfig:
    """Get current system configuration"""
    return _manager.config

def reload_config(new_config: Optional[BannerSystemConfig] = None) -> bool:
    """Reload system configuration"""
    return _manager.reload(new_config)

def get_cache_config() -> CacheConfig:
    """Get cache configuration"""
    return _manager.config.cache

def get_render_defaults() -> RenderDefaults:
    """Get rendering defaults"""
    return _manager.config.rendering

def get_animation_defaults() -> AnimationDefaults:
    """Get animation defaults"""
    return _manager.config.animation
