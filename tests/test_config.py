import unittest

from taskboard.config import Config


class ConfigTestCase(unittest.TestCase):
    def test_defaults(self):
        config = Config.from_env({})
        self.assertEqual(config.port, 3000)
        self.assertEqual(config.host, "127.0.0.1")
        self.assertFalse(config.debug)
        self.assertEqual(config.cors_origins, ["*"])

    def test_env_overrides(self):
        config = Config.from_env({
            "PORT": "8080",
            "FLASK_DEBUG": "true",
            "LOG_LEVEL": "debug",
            "CORS_ORIGINS": "http://a.test, http://b.test",
        })
        self.assertEqual(config.port, 8080)
        self.assertTrue(config.debug)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.cors_origins, ["http://a.test", "http://b.test"])

    def test_non_numeric_port_names_variable(self):
        with self.assertRaises(ValueError) as ctx:
            Config.from_env({"PORT": "abc"})
        self.assertIn("PORT", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
