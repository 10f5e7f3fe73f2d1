"""Custom exceptions untuk aplikasi IMUGOSSIP.

Every error reaches the client as an HTTP status: form problems re-render
with a message (400), missing sessions redirect to the login page (303),
ownership failures are 403 and missing records 404.
"""

from fastapi import HTTPException, status


class FormValidationException(HTTPException):
    """Exception ketika form tidak lengkap atau tidak valid (missing field, bad upload, duplicate user)."""

    def __init__(self, detail: str = "Tüm alanları doldurunuz"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class InvalidCredentialsException(HTTPException):
    """Exception ketika email atau password salah."""

    def __init__(self, detail: str = "Geçersiz email veya şifre"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


class LoginRequiredException(HTTPException):
    """
    Exception ketika request tidak memiliki session yang valid.

    Status Code: 303 See Other, Location: /login

    The default FastAPI handler keeps the Location header, so browsers and
    HTTP clients follow it to the login page.
    """

    def __init__(self, detail: str = "Giriş yapmanız gerekiyor", login_url: str = "/login"):
        super().__init__(
            status_code=status.HTTP_303_SEE_OTHER,
            detail=detail,
            headers={"Location": login_url},
        )


class ForbiddenException(HTTPException):
    """Exception ketika user bukan pemilik konten atau bukan admin."""

    def __init__(self, detail: str = "Yetkisiz"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


class NotFoundException(HTTPException):
    """Exception ketika record (post/comment) tidak ditemukan."""

    def __init__(self, detail: str = "Sayfa bulunamadı"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class StorageException(HTTPException):
    """Exception ketika penyimpanan (database atau file) gagal."""

    def __init__(self, detail: str = "Sunucu hatası"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )


__all__ = [
    "FormValidationException",
    "InvalidCredentialsException",
    "LoginRequiredException",
    "ForbiddenException",
    "NotFoundException",
    "StorageException",
]
