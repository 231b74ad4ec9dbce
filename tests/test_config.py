"""
Unit tests for configuration management.
"""

import os
import tempfile
import unittest
from pathlib import Path

from clubsite.config import ConfigManager


class TestConfigManager(unittest.TestCase):
    """Test configuration management functionality."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = Path(self.temp_dir) / "test_config.yaml"
        
    def tearDown(self):
        """Clean up test fixtures."""
        if self.config_path.exists():
            self.config_path.unlink()
        os.rmdir(self.temp_dir)
    
    def test_config_creation_with_defaults(self):
        """Test config manager falls back to defaults when file missing."""
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.cms_url, "https://cms.ftiaxesite.gr")
        self.assertEqual(config.tenant_code, "kallitechnia")
        self.assertEqual(config.environment, "production")
        self.assertFalse(config.is_development)
        self.assertEqual(config.download_cache_control, "public, max-age=3600, must-revalidate")
        self.assertEqual(config.posts_per_page, 10)
        self.assertIsNone(config.log_filename)
    
    def test_config_loading_from_file(self):
        """Test loading configuration from YAML file."""
        self.config_path.write_text("""
cms:
  url: "http://localhost:3000/"
  timeout: 2.5

site:
  tenant_code: "otherclub"
  environment: "development"
  posts_per_page: 4

server:
  port: 9000
""", encoding="utf-8")
        
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.cms_url, "http://localhost:3000")
        self.assertEqual(config.cms_timeout, 2.5)
        self.assertEqual(config.tenant_code, "otherclub")
        self.assertTrue(config.is_development)
        self.assertEqual(config.posts_per_page, 4)
        self.assertEqual(config.server_port, 9000)
        # Keys missing from the file keep their built-in values
        self.assertEqual(config.server_host, "127.0.0.1")
    
    def test_dot_notation_access(self):
        """Test getting nested values with dot notation."""
        self.config_path.write_text("cms:\n  url: http://cms\n", encoding="utf-8")
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.get("cms.url"), "http://cms")
        self.assertIsNone(config.get("cms.missing"))
        self.assertEqual(config.get("nothing.here", "fallback"), "fallback")
        self.assertEqual(config.get_section("cms"), {"url": "http://cms"})
        self.assertEqual(config.get_section("absent"), {})
    
    def test_reload(self):
        """Test reloading picks up file changes."""
        self.config_path.write_text("site:\n  environment: production\n", encoding="utf-8")
        config = ConfigManager(str(self.config_path))
        self.assertFalse(config.is_development)
        
        self.config_path.write_text("site:\n  environment: dev\n", encoding="utf-8")
        config.reload()
        self.assertTrue(config.is_development)
    
    def test_invalid_yaml_falls_back_to_defaults(self):
        """Test that an unreadable file does not break startup."""
        self.config_path.write_text("cms: [unclosed", encoding="utf-8")
        config = ConfigManager(str(self.config_path))
        
        self.assertEqual(config.tenant_code, "kallitechnia")


if __name__ == '__main__':
    unittest.main(verbosity=2)
