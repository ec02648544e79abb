"""HostelCare: hostel room allocation, swap and complaint API."""

__version__ = "1.0.0"
