"""Field types shared by video upload and update."""
from typing import Annotated
from pydantic import AfterValidator, Field, StringConstraints

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 5000
VIDEOFORMAT_MAX_LENGTH = 20
CATEGORY_MAX_LENGTH = 50
MAX_DURATION_SECONDS = 86400
MAX_TAGS = 20


def split_tags(raw: str) -> list[str]:
    """Comma separated tags, lowercased, empty and repeated ones dropped."""
    tags = []
    for tag in raw.split(","):
        tag = tag.strip().lower()
        if tag and tag not in tags:
            tags.append(tag)
    if len(tags) > MAX_TAGS:
        raise ValueError(f"A video can have at most {MAX_TAGS} tags")
    return tags


Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH)]
Description = Annotated[str, StringConstraints(strip_whitespace=True, max_length=DESCRIPTION_MAX_LENGTH)]
VideoFormat = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1, max_length=VIDEOFORMAT_MAX_LENGTH)
]
Duration = Annotated[float, Field(gt=0, le=MAX_DURATION_SECONDS, allow_inf_nan=False)]
Category = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1, max_length=CATEGORY_MAX_LENGTH)
]
Tags = Annotated[str, AfterValidator(split_tags)]
