"""
Configuration management for clubsite.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage the CMS connection, tenant, logging and
server settings without changing code.
"""

import yaml
import os
from pathlib import Path
from typing import Any, Dict
import logging


class ConfigManager:
    """
    Manages configuration loading and access for clubsite.
    """
    
    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.
        
        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()
    
    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
                
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
                
            logging.info(f"Configuration loaded from {self.config_path}")
            
        except Exception as e:
            logging.warning(f"Failed to load configuration, using defaults: {e}")
            self._config = self._get_default_config()
            
    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "cms": {
                "url": "https://cms.ftiaxesite.gr",
                "timeout": 10.0
            },
            "site": {
                "tenant_code": "kallitechnia",
                "environment": "production",
                "posts_per_page": 10
            },
            "download": {
                "cache_control": "public, max-age=3600, must-revalidate"
            },
            "server": {
                "host": "127.0.0.1",
                "port": 8000
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "file": None
            }
        }
    
    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.
        
        Args:
            key_path: Dot-separated path to the configuration value (e.g., "cms.url")
            default: Default value if key is not found
            
        Returns:
            The configuration value
            
        Examples:
            config.get("cms.url")  # Returns "https://cms.ftiaxesite.gr"
            config.get("site.tenant_code")  # Returns "kallitechnia"
        """
        keys = key_path.split('.')
        value = self._config
        
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
                
        return value
    
    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.
        
        Args:
            section: Name of the configuration section
            
        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})
    
    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
    
    # Convenience properties for commonly used values
    
    @property
    def cms_url(self) -> str:
        """Get the CMS origin, without a trailing slash."""
        return str(self.get("cms.url", "https://cms.ftiaxesite.gr")).rstrip('/')
    
    @property
    def cms_timeout(self) -> float:
        """Get the CMS request timeout in seconds."""
        return float(self.get("cms.timeout", 10.0))
    
    @property
    def tenant_code(self) -> str:
        """Get the tenant whose content this site serves."""
        return self.get("site.tenant_code", "kallitechnia")
    
    @property
    def environment(self) -> str:
        """Get the deployment environment name."""
        return self.get("site.environment", "production")
    
    @property
    def is_development(self) -> bool:
        """Whether diagnostic output for content authors is enabled."""
        return str(self.environment).lower() in ("development", "dev")
    
    @property
    def posts_per_page(self) -> int:
        """Get the number of posts shown per news page."""
        return int(self.get("site.posts_per_page", 10))
    
    @property
    def download_cache_control(self) -> str:
        """Get the Cache-Control header used by the download proxy."""
        return self.get("download.cache_control", "public, max-age=3600, must-revalidate")
    
    @property
    def server_host(self) -> str:
        """Get the interface the web server binds to."""
        return self.get("server.host", "127.0.0.1")
    
    @property
    def server_port(self) -> int:
        """Get the port the web server listens on."""
        return int(self.get("server.port", 8000))
    
    @property
    def log_filename(self):
        """Get the optional log file name."""
        return self.get("logging.file")


# Global configuration instance
config = ConfigManager(os.getenv("CLUBSITE_CONFIG", "config.yaml"))
