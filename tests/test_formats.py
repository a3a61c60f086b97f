import pytest
from framer.imaging.formats import is_supported_input, output_format_for
from framer.models.enums import OutputFormat
from framer.models.errors import EncodeError

@pytest.mark.parametrize(
    "name,fmt",
    [
        ("a.jpg", OutputFormat.JPEG),
        ("a.JPEG", OutputFormat.JPEG),
        ("a.png", OutputFormat.PNG),
        ("dir.v2/a.webp", OutputFormat.WEBP),
    ],
)
def test_output_format_from_extension(name, fmt):
    assert output_format_for(name) is fmt

@pytest.mark.parametrize("name", ["a.bmp", "a.gif", "noext", "a.png.tmp"])
def test_unknown_output_extension_is_encode_error(name):
    with pytest.raises(EncodeError):
        output_format_for(name)

def test_supported_inputs():
    assert is_supported_input("photo.JPG")
    assert is_supported_input("photo.webp")
    assert not is_supported_input("photo.tiff")
    assert not is_supported_input("README")
