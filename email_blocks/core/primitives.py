"""
Primitives partagées par tous les schémas de blocs.

Couleurs hex, valeurs px, padding 0–200, alignement, et URL-ou-merge-tag.
Les modèles acceptent les clés camelCase (JSON éditeur / IA) et snake_case.
"""
import re
from typing import Annotated, Literal, Union

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

MERGE_TAG_RE = re.compile(r"^\{\{.+\}\}$")

_URL_ADAPTER = TypeAdapter(AnyUrl)


class EmailModel(BaseModel):
    """Base commune : alias camelCase, population par nom, champs inconnus ignorés."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_url_or_merge_tag(value: str) -> str:
    if value == "" or MERGE_TAG_RE.match(value):
        return value
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise ValueError("URL invalide (attendu : URL absolue, merge tag {{...}} ou vide)") from e
    return value


HexColor = Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{6}$")]
BackgroundColor = Annotated[str, Field(pattern=r"^(#[0-9A-Fa-f]{6}|transparent)$")]
PixelValue = Annotated[str, Field(pattern=r"^\d+px$")]
LineHeight = Annotated[str, Field(pattern=r"^\d+(\.\d+)?$")]
FontWeight = Annotated[int, Field(ge=100, le=900)]
UrlOrMergeTag = Annotated[str, AfterValidator(_check_url_or_merge_tag)]
FontFamily = Annotated[str, Field(min_length=1, max_length=500, pattern=r"^[\w\s,'.-]+$")]

Alignment = Literal["left", "center", "right"]
ImageWidth = Union[PixelValue, Literal["100%"]]


class Padding(EmailModel):
    top: int = Field(default=20, ge=0, le=200)
    right: int = Field(default=20, ge=0, le=200)
    bottom: int = Field(default=20, ge=0, le=200)
    left: int = Field(default=20, ge=0, le=200)


def padding_of(top: int, right: int, bottom: int, left: int) -> Padding:
    return Padding(top=top, right=right, bottom=bottom, left=left)
