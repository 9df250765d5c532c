from .renderer import (
    RasterImage,
    render_to_image,
    render_to_file,
    render_to_axes,
    preview,
)
