"""ActivateROI: ROI projection engine and builder wizard for data activation deals."""

__version__ = "0.1.0"
