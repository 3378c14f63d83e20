"""
Request field types.

Constraints live on the types so FastAPI rejects bad input before the handler
runs; the RequestValidationError handler turns that into a 400 listing the
offending fields.
"""
from typing import Annotated
from fastapi import Path
from pydantic import AfterValidator, EmailStr, Field, StringConstraints

# largest value a BIGINT primary key can hold
MAX_ID = 2**63 - 1

USERNAME_PATTERN = r"^[A-Za-z0-9_]{3,20}$"
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

# ids in the URL path
PathId = Annotated[int, Path(ge=1, le=MAX_ID)]
# ids in a JSON body
RowId = Annotated[int, Field(ge=1, le=MAX_ID)]

Email = Annotated[EmailStr, AfterValidator(str.lower)]
Username = Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, pattern=USERNAME_PATTERN)]
Password = Annotated[str, StringConstraints(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)]
FullName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
Bio = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
