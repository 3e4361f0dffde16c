"""
Typed configuration payloads for page components.

Every component type has exactly one model here. The models form a closed
union discriminated on ``component``, which is injected from the row's
component type when a stored config is parsed, so stored JSON never needs
to carry it. Stored keys keep their camelCase spelling (``className``,
``customStyles``, ``listType`` ...); attributes are snake_case.

Out-of-range enumerated values fall back to the variant default instead of
failing validation. Missing required fields do fail validation.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from .exceptions import InvalidComponentConfig, UnsupportedComponent

Animation = Literal["fade", "slide", "zoom", "none"]
Size = Union[int, str]

ANIMATIONS = ("fade", "slide", "zoom", "none")
TEXT_ALIGNMENTS = ("left", "center", "right")


def fallback(value: Any, allowed, default):
    """Return ``value`` if it is one of ``allowed``, else ``default``."""
    return value if value in allowed else default


def bounded_int(value: Any, low: int, high: int, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if low <= number <= high else default


class ComponentBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    class_name: Optional[str] = Field(default=None, alias="className")
    custom_styles: Dict[str, Any] = Field(default_factory=dict, alias="customStyles")
    animation: Animation = "fade"

    @field_validator("animation", mode="before")
    @classmethod
    def _animation(cls, value):
        return fallback(value, ANIMATIONS, "fade")

    @field_validator("custom_styles", mode="before")
    @classmethod
    def _custom_styles(cls, value):
        return value if isinstance(value, dict) else {}


class HeadingConfig(ComponentBase):
    component: Literal["heading"] = "heading"
    text: str
    level: int = 2
    alignment: Literal["left", "center", "right"] = "left"

    @field_validator("level", mode="before")
    @classmethod
    def _level(cls, value):
        return bounded_int(value, 1, 6, 2)

    @field_validator("alignment", mode="before")
    @classmethod
    def _alignment(cls, value):
        return fallback(value, TEXT_ALIGNMENTS, "left")


class ParagraphConfig(ComponentBase):
    component: Literal["paragraph"] = "paragraph"
    text: str
    alignment: Literal["left", "center", "right", "justify"] = "left"

    @field_validator("alignment", mode="before")
    @classmethod
    def _alignment(cls, value):
        return fallback(value, TEXT_ALIGNMENTS + ("justify",), "left")


class ImageConfig(ComponentBase):
    component: Literal["image"] = "image"
    src: str
    alt: str = ""
    caption: Optional[str] = None
    width: Optional[Size] = None
    height: Optional[Size] = None
    alignment: Literal["left", "center", "right"] = "center"

    @field_validator("alt", mode="before")
    @classmethod
    def _alt(cls, value):
        return value or ""

    @field_validator("alignment", mode="before")
    @classmethod
    def _alignment(cls, value):
        return fallback(value, TEXT_ALIGNMENTS, "center")


class CardConfig(ComponentBase):
    component: Literal["card"] = "card"
    title: Optional[str] = None
    # Plain text, or a nested component config tagged by "component".
    # A bare "type" key is read as the tag when "component" is absent, so a
    # nested file needs "component" to keep "type" as its MIME type.
    content: Union[str, Dict[str, Any]] = ""
    image: Optional[ImageConfig] = None

    @field_validator("content", mode="before")
    @classmethod
    def _content(cls, value):
        return "" if value is None else value


class ListConfig(ComponentBase):
    component: Literal["list"] = "list"
    items: List[str] = Field(default_factory=list)
    list_type: Literal["ordered", "unordered"] = Field(default="unordered", alias="listType")

    @model_validator(mode="before")
    @classmethod
    def _legacy_ordered_flag(cls, data):
        if isinstance(data, dict) and "listType" not in data and "list_type" not in data:
            if data.get("ordered"):
                data = {**data, "listType": "ordered"}
        return data

    @field_validator("items", mode="before")
    @classmethod
    def _items(cls, value):
        if not isinstance(value, (list, tuple)):
            return []
        return [str(item) for item in value]

    @field_validator("list_type", mode="before")
    @classmethod
    def _list_type(cls, value):
        return fallback(value, ("ordered", "unordered"), "unordered")


class GridItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    content: str = ""
    span: int = 1
    class_name: Optional[str] = Field(default=None, alias="className")

    @field_validator("id", "content", mode="before")
    @classmethod
    def _text(cls, value):
        return "" if value is None else str(value)

    @field_validator("span", mode="before")
    @classmethod
    def _span(cls, value):
        return bounded_int(value, 1, 12, 1)


class GridConfig(ComponentBase):
    component: Literal["grid"] = "grid"
    columns: int = 2
    gap: str = "1rem"
    items: List[GridItem] = Field(default_factory=list)

    @field_validator("columns", mode="before")
    @classmethod
    def _columns(cls, value):
        return bounded_int(value, 1, 12, 2)


class DividerConfig(ComponentBase):
    component: Literal["divider"] = "divider"
    variant: Literal["solid", "dashed", "dotted"] = "solid"
    thickness: int = 1
    color: Optional[str] = None

    @field_validator("variant", mode="before")
    @classmethod
    def _variant(cls, value):
        return fallback(value, ("solid", "dashed", "dotted"), "solid")

    @field_validator("thickness", mode="before")
    @classmethod
    def _thickness(cls, value):
        return bounded_int(value, 1, 64, 1)


class ButtonConfig(ComponentBase):
    component: Literal["button"] = "button"
    text: str
    href: Optional[str] = None
    button_type: Literal["button", "submit", "reset"] = Field(default="button", alias="buttonType")
    variant: Literal["primary", "secondary", "outline", "text"] = "primary"
    icon: Optional[str] = None
    disabled: bool = False
    loading: bool = False

    @field_validator("button_type", mode="before")
    @classmethod
    def _button_type(cls, value):
        return fallback(value, ("button", "submit", "reset"), "button")

    @field_validator("variant", mode="before")
    @classmethod
    def _variant(cls, value):
        return fallback(value, ("primary", "secondary", "outline", "text"), "primary")


class QuoteConfig(ComponentBase):
    component: Literal["quote"] = "quote"
    text: str
    citation: Optional[str] = None
    variant: Literal["default", "bordered", "highlighted"] = "default"

    @field_validator("variant", mode="before")
    @classmethod
    def _variant(cls, value):
        return fallback(value, ("default", "bordered", "highlighted"), "default")


class VideoConfig(ComponentBase):
    component: Literal["video"] = "video"
    url: str
    caption: Optional[str] = None
    autoplay: bool = False
    controls: bool = True
    width: Optional[Size] = None
    height: Optional[Size] = None


class TableConfig(ComponentBase):
    component: Literal["table"] = "table"
    headers: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)
    striped: bool = False
    bordered: bool = False

    @field_validator("headers", mode="before")
    @classmethod
    def _headers(cls, value):
        return [str(cell) for cell in value] if isinstance(value, (list, tuple)) else []

    @field_validator("rows", mode="before")
    @classmethod
    def _rows(cls, value):
        if not isinstance(value, (list, tuple)):
            return []
        return [
            [str(cell) for cell in row]
            for row in value
            if isinstance(row, (list, tuple))
        ]


class FileConfig(ComponentBase):
    component: Literal["file"] = "file"
    url: str
    name: str
    size: Optional[str] = None
    # Stored under "type", which is the file's MIME type here
    mime_type: Optional[str] = Field(default=None, alias="type")
    icon: Optional[str] = None

    @field_validator("size", mode="before")
    @classmethod
    def _size(cls, value):
        return None if value is None else str(value)


ComponentConfig = Annotated[
    Union[
        HeadingConfig,
        ParagraphConfig,
        ImageConfig,
        CardConfig,
        GridConfig,
        DividerConfig,
        ButtonConfig,
        ListConfig,
        QuoteConfig,
        VideoConfig,
        TableConfig,
        FileConfig,
    ],
    Field(discriminator="component"),
]

CONFIG_MODELS = {
    "heading": HeadingConfig,
    "paragraph": ParagraphConfig,
    "image": ImageConfig,
    "card": CardConfig,
    "grid": GridConfig,
    "divider": DividerConfig,
    "button": ButtonConfig,
    "list": ListConfig,
    "quote": QuoteConfig,
    "video": VideoConfig,
    "table": TableConfig,
    "file": FileConfig,
}

_config_adapter = TypeAdapter(ComponentConfig)


def parse_config(component_type: str, raw: Any):
    """
    Validate a stored config against the variant for ``component_type``.

    Raises UnsupportedComponent for an unknown type and
    InvalidComponentConfig when required fields are missing or malformed.
    """
    if not isinstance(component_type, str) or component_type not in CONFIG_MODELS:
        raise UnsupportedComponent(component_type)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidComponentConfig(component_type, "config must be an object")

    try:
        return _config_adapter.validate_python({**raw, "component": component_type})
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"][1:]) or "config" for err in exc.errors()})
        raise InvalidComponentConfig(component_type, f"bad or missing {', '.join(fields)}") from exc
