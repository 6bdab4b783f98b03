from __future__ import annotations

from math import prod
from typing import Iterable

from expando.core.expand.expander import find_groups, is_comment, split_alternatives
from expando.core.model import ExpansionSummary, LineStats


# Stats describe the expansion without materializing it. For every line:
#   count == len(expand([line]))
# i.e. 0 for comments, 1 for lines without groups, product of sizes otherwise.


def line_stats(lines: Iterable[str]) -> list[LineStats]:
    out: list[LineStats] = []
    for i, line in enumerate(lines, start=1):
        if is_comment(line):
            out.append(LineStats(index=i, text=line, group_sizes=(), count=0, comment=True))
            continue
        sizes = tuple(len(split_alternatives(g.content)) for g in find_groups(line))
        out.append(LineStats(index=i, text=line, group_sizes=sizes, count=prod(sizes)))
    return out


def summarize(stats: list[LineStats]) -> ExpansionSummary:
    return ExpansionSummary(
        lines=len(stats),
        comments=sum(1 for s in stats if s.comment),
        outputs=sum(s.count for s in stats),
    )
