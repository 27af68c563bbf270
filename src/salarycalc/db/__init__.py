from .tables import CapabilityRow, EmployeeRow, RoleRow, WorkRow

__all__ = ["EmployeeRow", "RoleRow", "CapabilityRow", "WorkRow"]
