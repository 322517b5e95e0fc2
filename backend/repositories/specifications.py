"""
Query Specifications

A specification is a named, composable vehicle query. Each one answers the
same question twice: in memory (is_satisfied_by) and as a MongoDB filter
(to_mongo_filter), so the Mongo adapter and in-memory doubles share one
definition of every lookup.

    spec = VehicleByIdSpec(vehicle.id) & VehicleVersionSpec(vehicle.version)
    collection.replace_one(spec.to_mongo_filter(), document)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, TypeVar


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """Base class for query criteria; combine with &."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Evaluate the criterion against an in-memory object.

        Args:
            candidate: Object under test

        Returns:
            True if the candidate matches
        """

    @abstractmethod
    def to_mongo_filter(self) -> Dict[str, Any]:
        """Filter document for find()/count_documents()."""

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AllOf(self, other)


class AllOf(Specification[T]):
    """Matches when both operands match ($and)."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.parts = (left, right)

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(part.is_satisfied_by(candidate) for part in self.parts)

    def to_mongo_filter(self) -> Dict[str, Any]:
        return {"$and": [part.to_mongo_filter() for part in self.parts]}
