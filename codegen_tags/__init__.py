"""Package for indexing code-generation tags across a source tree.

Modules:
- extract.py: Generator tag extraction from raw file contents.
- fs_scan.py: Tree walking and per-package aggregation of tags.
- flatten.py: Deterministic flattening of the aggregated index.
- bzl.py: Starlark document model and canonical formatting.
- writer.py: Diff-aware, atomic writes of generated files.
- generator.py: The full walk, flatten and write pass.
- config.py: Loading and validating the JSON configuration.
- model.py: Data structures for configuration and results.
- errors.py: Exceptions raised by the generation pass.
"""

__all__ = [
	"bzl",
	"config",
	"errors",
	"extract",
	"flatten",
	"fs_scan",
	"generator",
	"model",
	"writer",
]
