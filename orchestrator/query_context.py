"""
查询上下文
查询层提供的列约束（目前只用到 uid 的等值约束）
"""
from typing import Dict, List, Optional, Iterable
from dataclasses import dataclass, field


@dataclass
class ConstraintList:
    """单列的等值约束"""
    values: List[str] = field(default_factory=list)

    def exists(self) -> bool:
        return bool(self.values)

    def matches(self, value: str) -> bool:
        return value in self.values

    def not_exists_or_matches(self, value: str) -> bool:
        """没有约束，或约束包含该值"""
        return not self.exists() or self.matches(value)


@dataclass
class QueryContext:
    """查询上下文"""
    constraints: Dict[str, ConstraintList] = field(default_factory=dict)

    @classmethod
    def from_uids(cls, uids: Optional[Iterable[str]] = None) -> "QueryContext":
        context = cls()
        if uids:
            context.constraints['uid'] = ConstraintList(values=[str(u) for u in uids])
        return context

    def constraint(self, column: str) -> ConstraintList:
        """列约束，不存在时返回空约束"""
        return self.constraints.get(column, ConstraintList())
