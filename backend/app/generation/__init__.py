"""Website generation: prompt building, artifact extraction, and project materialization."""

from app.generation.extractor import ArtifactSet, extract, locate_json_block, parse_artifact_block
from app.generation.materializer import ProjectRecord, materialize, slugify
from app.generation.prompts import SYSTEM_INSTRUCTION, build_user_prompt

__all__ = [
    "ArtifactSet",
    "ProjectRecord",
    "SYSTEM_INSTRUCTION",
    "build_user_prompt",
    "extract",
    "locate_json_block",
    "materialize",
    "parse_artifact_block",
    "slugify",
]
