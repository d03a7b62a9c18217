from employees_api.schemas.employees import EmployeeFields

# Checked (and reported) in this order
REQUIRED_FIELDS = ["first_name", "last_name", "employee_type", "email", "begin_date", "job_title"]


def _wire_name(field: str) -> str:
    return EmployeeFields.model_fields[field].alias or field


def missing_required_fields(payload: EmployeeFields) -> list[str]:
    # empty strings count as missing
    return [_wire_name(f) for f in REQUIRED_FIELDS if not getattr(payload, f)]


def null_required_fields(changes: dict) -> list[str]:
    """Required fields explicitly set to null in a partial update."""
    return [_wire_name(f) for f in REQUIRED_FIELDS if f in changes and changes[f] is None]
