# responsive_metrics/main.py
"""
The Looking Glass.

A live preview app: one label that re-renders the engine's report every time
the window is resized or rotated. Imported only by the launcher, so the rest
of the package never pulls in a Kivy window.
"""
import os
import logging
from datetime import datetime
from typing import Optional

from kivy.app import App
from kivy.uix.label import Label

from .engine import ResponsiveSystem, format_report
from .resource_manager import ResourceManager
from .responsive import bind_viewport, body_sp, current_viewport
from .schemas import ViewportMetrics


class ResponsiveMetricsPreviewApp(App):

    def __init__(self, tables_path: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)

        # Configure logging FIRST
        self._configure_app_logging()

        self.resource_manager = ResourceManager()
        self.system = ResponsiveSystem(self.resource_manager.load_tables(tables_path))
        self.label = None
        self._unbind = None

    def build(self):
        self.title = "Responsive Metrics Preview"
        self.label = Label(halign='left', valign='middle')
        self.label.bind(size=lambda lbl, size: setattr(lbl, 'text_size', size))
        self._unbind = bind_viewport(self.refresh)
        self.refresh(current_viewport())
        self.logger.info("ResponsiveMetricsPreviewApp build() completed successfully.")
        return self.label

    def refresh(self, metrics: ViewportMetrics):
        report = self.system.describe(metrics)
        self.logger.debug(f"Viewport changed: {metrics}")
        self.label.font_size = body_sp(metrics, self.system)
        self.label.text = format_report(report)

    def on_stop(self):
        self.logger.info("Application stopping.")
        if self._unbind:
            self._unbind()

    def _configure_app_logging(self):
        """
        Configures logging to create a unique, timestamped log for each session
        inside a 'logs' directory in the PROJECT ROOT.
        """
        self.logger = logging.getLogger("ResponsiveMetricsPreviewApp")

        try:
            project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
            log_dir = os.path.join(project_root, "logs")
            os.makedirs(log_dir, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            session_log_file = os.path.join(log_dir, f"session_{timestamp}.txt")
            consolidated_log_file = os.path.join(log_dir, "responsive_metrics_consolidated.txt")
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

            session_handler = logging.FileHandler(session_log_file, mode='w', encoding='utf-8')
            session_handler.setFormatter(formatter)
            consolidated_handler = logging.FileHandler(consolidated_log_file, mode='a', encoding='utf-8')
            consolidated_handler.setFormatter(formatter)

            root_logger = logging.getLogger()
            root_logger.handlers.clear()
            root_logger.addHandler(session_handler)
            root_logger.addHandler(consolidated_handler)
            root_logger.setLevel(logging.INFO)

            self.logger.info(f"Logging configured. Session log: {session_log_file}")

        except OSError as e:
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s', force=True)
            self.logger = logging.getLogger("ResponsiveMetricsPreviewApp")
            self.logger.error(f"Error configuring file logging: {e}. Using basic console config.", exc_info=True)
