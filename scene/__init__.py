from .compose import (
    ShapeKind,
    SHAPE_KINDS,
    RANDOM_FACTORIES,
    SceneConfig,
    random_shape,
    random_scene,
    demo_scene,
    initialize_scene,
    draw_scene,
)
