import sys
from pathlib import Path

from objmesh import ObjLoader, ObjLoadError, Config
from objmesh.utils import logger, set_level


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).with_name("cube.obj")

    cfg = Config(Path(__file__).with_name("objmesh.json"))
    set_level(cfg["log_level"])
    loader = ObjLoader.from_config(cfg)

    logger.info(f"Loading {path} ({loader.layout.value}, colors={loader.load_color_data})...")
    try:
        mesh = loader.load(path)
    except ObjLoadError:
        sys.exit(1)

    logger.info(f"{mesh}: first vertex = {mesh.vertex_data[:7].tolist()}")
