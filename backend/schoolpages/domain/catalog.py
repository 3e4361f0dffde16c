# Seed rows for the component_types table: (name, description, icon)
COMPONENT_TYPE_CATALOG = (
    ("heading", "Section title, levels 1 to 6", "heading"),
    ("paragraph", "Block of body text", "align-left"),
    ("image", "Single image with optional caption", "image"),
    ("card", "Boxed content with optional title and image", "square"),
    ("grid", "Multi-column grid of text items", "layout-grid"),
    ("divider", "Horizontal rule", "minus"),
    ("button", "Call-to-action button or link", "mouse-pointer"),
    ("list", "Ordered or unordered list", "list"),
    ("quote", "Quotation with optional citation", "quote"),
    ("video", "Embedded video player", "video"),
    ("table", "Table of rows and columns", "table"),
    ("file", "Downloadable file link", "file-text"),
)
