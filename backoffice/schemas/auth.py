"""Login form and session-related response schemas."""

from pydantic import BaseModel, EmailStr, Field, field_validator


def is_local_path(url: str) -> bool:
    """True for same-site absolute paths like /admin/orders (no scheme, host or backslash)."""
    return (
        url.startswith("/")
        and not url.startswith("//")
        and "\\" not in url
        and ":" not in url.split("?", 1)[0]
    )


class LoginForm(BaseModel):
    """Fields posted by the back-office login form."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=1024)
    stay_logged_in: bool = False
    redirect_url: str | None = None

    @field_validator("redirect_url", mode="before")
    @classmethod
    def drop_unsafe_redirect(cls, value: object) -> str | None:
        """Keep only local paths; anything else falls back to the default landing page."""
        if not isinstance(value, str):
            return None
        value = value.strip()
        if not value or not is_local_path(value):
            return None
        return value


class CurrentEmployeeResponse(BaseModel):
    """Response for GET /admin/me."""

    employee_id: str
    email: str
    roles: list[str]
