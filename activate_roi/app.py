"""ActivateROI session: page navigation between builder, report and library."""

from __future__ import annotations

import logging
from typing import Optional

from activate_roi.config.settings import Settings
from activate_roi.library.collection import ReportCollectionView
from activate_roi.library.loader import get_report_library
from activate_roi.models.enums import Page
from activate_roi.reference.schema import ReferenceData
from activate_roi.wizard.machine import WizardStateMachine
from activate_roi.wizard.state import ReportPayload

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())


class AppSession:
    """One user's session: the wizard, the report it produced and the library."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        reference_data: Optional[ReferenceData] = None,
        library: Optional[ReportCollectionView] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.wizard = WizardStateMachine(
            reference_data=reference_data,
            settings=self.settings,
            on_generate=self.handle_generate,
        )
        self.library = library if library is not None else get_report_library(self.settings)
        self.page = Page.BUILDER
        self.report: Optional[ReportPayload] = None
        self.welcomed = False

    def mark_welcomed(self) -> None:
        self.welcomed = True

    def handle_generate(self, payload: ReportPayload) -> None:
        self.report = payload
        self.page = Page.REPORT
        logger.info("Showing report for %s", payload.profile.company)

    def handle_back(self) -> None:
        """Leave the report (or library) for a fresh builder."""
        self.page = Page.BUILDER
        self.report = None
        self.wizard.reset()

    def open_library(self) -> None:
        self.page = Page.LIBRARY

    def navigate(self, page: Page | str) -> None:
        """Sidebar navigation: the builder entry always starts over."""
        page = Page(page)
        if page is Page.BUILDER:
            self.handle_back()
        elif page is Page.LIBRARY:
            self.open_library()
        elif self.report is not None:
            self.page = Page.REPORT
