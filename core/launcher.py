"""
Gram Wallet Launcher

Runs before anything else in the process: reads the command line,
decides where the wallet keeps its state and hands control to the Qt
application. Nothing here may depend on logging being set up until the
working path is known.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from PyQt6.QtCore import QCoreApplication

from core import arguments as command_line
from core.build_info import BuildInfo
from core.runtime_path import resolve_executable_path, resolve_app_data_path, temp_location
from core.working_path import select_base, compute_working_path
from core.writability import can_write
from core.system import startup as platform_startup
from core.ui.main_queue_processor import MainQueueProcessor
from core.utils.concurrent_timer import ConcurrentTimerEnvironment
from core.utils.logs import configure_logging

logger = logging.getLogger(__name__)

APPLICATION_NAME = "Gram Wallet"


@dataclass
class PathSet:
    executable_directory: str = ""
    executable_name: str = ""
    app_data_directory: str = ""
    working_path: Optional[str] = None


@dataclass
class BootstrapContext:
    argv: Optional[tuple]
    arguments: List[str] = field(default_factory=list)
    filtered: list = field(default_factory=list)
    opened_url: str = ""
    paths: PathSet = field(default_factory=PathSet)


class Launcher:
    def __init__(self, argv, build_info=None, sandbox_factory=None,
                 startup=platform_startup, sink=None, environ=None,
                 resolve_executable=resolve_executable_path,
                 resolve_app_data=resolve_app_data_path,
                 probe=can_write, setup_logging=True):
        self._context = BootstrapContext(argv=tuple(argv) if argv is not None else None)
        self._build_info = build_info or BuildInfo.detect()
        self._sandbox_factory = sandbox_factory
        self._startup = startup
        self._sink = sink
        self._environ = os.environ if environ is None else environ
        self._resolve_executable = resolve_executable
        self._resolve_app_data = resolve_app_data
        self._probe = probe
        self._setup_logging = setup_logging

    @classmethod
    def create(cls, argv, **collaborators):
        return cls(argv, **collaborators)

    def init(self):
        parsed = command_line.parse(self._context.argv, self._sink)
        self._context.arguments = parsed.arguments
        self._context.filtered = parsed.filtered

        QCoreApplication.setApplicationName(APPLICATION_NAME)

        self._prepare_settings(parsed)

        self._startup.apply_display_scaling(self._build_info.platform, self._environ)

        self._init_working_path()

        if self._setup_logging:
            configure_logging(self._context.paths.working_path)
        self._log_paths()

    def _prepare_settings(self, parsed):
        paths = self._context.paths
        paths.executable_directory, paths.executable_name = \
            self._resolve_executable(self._context.argv)
        paths.app_data_directory = self._resolve_app_data()
        self._context.opened_url = parsed.opened_url

    def _init_working_path(self):
        paths = self._context.paths
        base = select_base(
            paths.executable_directory,
            paths.app_data_directory,
            self._build_info,
            probe=self._probe)
        paths.working_path = compute_working_path(base)

    def _log_paths(self):
        paths = self._context.paths
        logger.info("[Launcher] Build: %s / %s",
                    self._build_info.platform.value, self._build_info.variant.value)
        logger.info("[Launcher] Arguments: %s", self.arguments_string())
        logger.info("[Launcher] Executable: %s%s",
                    paths.executable_directory or "<unknown>/", paths.executable_name)
        logger.info("[Launcher] App data: %s", paths.app_data_directory)
        logger.info("[Launcher] Working path: %s", paths.working_path)
        if self._context.opened_url:
            logger.info("[Launcher] Opened URL: %s", self._context.opened_url)

    def exec(self):
        self.init()

        options = self._startup.startup_options(temp_location())
        self._startup.start(options, self._build_info.platform, self._environ)
        try:
            result = self._execute_application()
        finally:
            self._startup.finish(self._build_info.platform)
        return result

    def _execute_application(self):
        factory = self._sandbox_factory
        if factory is None:
            # QtWidgets is only loaded once the UI is actually started
            from core.sandbox import Sandbox
            factory = Sandbox
        sandbox = factory(self, self._context.filtered)
        with MainQueueProcessor() as processor, ConcurrentTimerEnvironment(processor):
            return sandbox.exec()

    # --- Accessors ---
    def context(self):
        return self._context

    def build_info(self):
        return self._build_info

    def arguments(self):
        return list(self._context.arguments)

    def arguments_string(self):
        return ' '.join(self._context.arguments)

    def executable_path(self):
        return self._context.paths.executable_directory

    def executable_name(self):
        return self._context.paths.executable_name

    def app_data_path(self):
        return self._context.paths.app_data_directory

    def working_path(self):
        return self._context.paths.working_path

    def opened_url(self):
        return self._context.opened_url
