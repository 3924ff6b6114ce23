"""
Export and report configuration defaults.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path

# Report fields hidden unless explicitly requested
DEFAULT_REPORT_EXCLUDE: tuple[str, ...] = ("O", "Oaxis")

# Mesh file formats trimesh can write for surface meshes and point clouds
MESH_FILE_TYPES = ("stl", "ply", "obj", "off", "glb")
POINT_FILE_TYPES = ("ply",)


@dataclass(frozen=True)
class ExportOptions:
    """
    Settings for placed-geometry export.

    Parameters
    ----------
    output_dir : Path
        Directory the files are written into. Created on demand.
    file_type : str
        Mesh format for solid and surface shapes. Default "stl".
    sphere_subdivisions : int
        Icosphere subdivision level for ``ShapeSphere``.
    cylinder_sections : int
        Number of facets around the circumference of ``ShapeCyl``.
    point_file_type : str
        Point-cloud format used for ``ShapePoint``.
    """
    output_dir: Path = field(default_factory=lambda: Path("."))
    file_type: str = "stl"
    sphere_subdivisions: int = 3
    cylinder_sections: int = 32
    point_file_type: str = "ply"

    def __post_init__(self):
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        if self.sphere_subdivisions < 0:
            raise ValueError(f"sphere_subdivisions must be >= 0, got {self.sphere_subdivisions}")
        if self.cylinder_sections < 3:
            raise ValueError(f"cylinder_sections must be >= 3, got {self.cylinder_sections}")

    @classmethod
    def from_preset(cls, preset: str = "default", **overrides) -> ExportOptions:
        """
        Build options from a named preset with optional overrides.

        Presets: 'default', 'coarse', 'fine'
        """
        if preset not in EXPORT_PRESETS:
            raise ValueError(
                f"Unknown export preset '{preset}'. Valid options: {sorted(EXPORT_PRESETS)}"
            )
        return replace(EXPORT_PRESETS[preset], **overrides)

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    def with_output_dir(self, output_dir: str | Path) -> ExportOptions:
        return replace(self, output_dir=Path(output_dir))


EXPORT_PRESETS: dict[str, ExportOptions] = {
    "default": ExportOptions(),
    "coarse": ExportOptions(sphere_subdivisions=1, cylinder_sections=12),
    "fine": ExportOptions(sphere_subdivisions=5, cylinder_sections=128),
}
