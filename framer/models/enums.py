from enum import Enum

class Orientation(Enum):
    HORIZONTAL = "Horizontal"  # bars above and below
    VERTICAL = "Vertical"      # bars left and right
    EXACT = "Exact"            # canvas equals source, no bars

class OutputFormat(Enum):
    JPEG = "JPEG"
    PNG = "PNG"
    WEBP = "WEBP"

    @property
    def extension(self) -> str:
        return "." + self.value.lower()
