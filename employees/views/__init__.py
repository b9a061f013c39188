from .employees import EmployeeAllView, EmployeeDetailView, EmployeeListView

__all__ = [
    "EmployeeListView",
    "EmployeeAllView",
    "EmployeeDetailView",
]
