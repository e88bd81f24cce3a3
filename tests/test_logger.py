import logging
import unittest

from puzzlegrid.utils.logger import ROOT_LOGGER_NAME, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_configure_replaces_root_handlers(self) -> None:
        configure_logging(logging.DEBUG)
        configure_logging(logging.WARNING)
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.WARNING)

    def test_get_logger_defaults_to_package_name(self) -> None:
        self.assertEqual(get_logger().name, ROOT_LOGGER_NAME)
        self.assertEqual(get_logger("puzzlegrid.engine").name, "puzzlegrid.engine")

    def test_get_logger_keeps_existing_handlers(self) -> None:
        root = logging.getLogger()
        sentinel = logging.NullHandler()
        root.handlers[:] = [sentinel]
        get_logger("puzzlegrid.cli")
        self.assertEqual(root.handlers, [sentinel])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
