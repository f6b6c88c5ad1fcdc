from __future__ import annotations

from typing import Dict, List

from .fs_scan import AggregateIndex

FlattenedIndex = Dict[str, Dict[str, List[str]]]


def flatten(tags_values_pkgs: AggregateIndex) -> FlattenedIndex:
	"""Copy the index with each package set turned into a sorted list.

	Tags and values are inserted in sorted order as well so the rendered file
	does not depend on set or walk ordering.
	"""
	flattened: FlattenedIndex = {}
	for tag in sorted(tags_values_pkgs):
		values_pkgs = tags_values_pkgs[tag]
		flattened[tag] = {value: sorted(values_pkgs[value]) for value in sorted(values_pkgs)}
	return flattened
