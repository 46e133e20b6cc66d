"""
In-memory table of weather observations and its analytical queries.

The table is built once from the decoded lines of a file and is never
mutated afterwards.  Every query returns a QueryResult holding the
selected observations, their fixed-width text rendering and the same
rows as CSV text for export.
"""

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Collection, Dict, List, Optional, Sequence

import numpy as np

from config import (
    DEFAULT_FORMAT,
    FIELD_DELIMITER,
    FISHING_MAX_WIND_SPEED,
    FISHING_WIND_DIRECTIONS,
    FormatConfig,
    GROUP_HEAD_TAIL,
    MIN_SUNSHINE_HOURS,
    NORMAL_PRESSURE_RANGE,
    TABLE_HEAD_TAIL,
    WARM_DAY_MIN_TEMP,
)
from models.observation import Observation, Reading, compare_rainfall, parse_observation
from reporting.report import (
    average_rainfall_line,
    longest_sunshine_report,
    statistics_report,
)
from visualization.text_table import ColumnLayout, TextTableRenderer, compute_layout

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Output of a table query.

    Args:
        observations: Selected observations in display order.
        text: Fixed-width text table (with any report lines) for display.
        csv: Header line plus one raw source line per observation.
        report: Report text that accompanies the table, if any.
        longest: Observation with the longest sunshine (sunshine query only).
        groups: Per-location groups (grouped rainfall query only).
    """

    observations: List[Observation]
    text: str
    csv: str
    report: str = ""
    longest: Optional[Observation] = None
    groups: List["LocationGroup"] = field(default_factory=list)


@dataclass
class LocationGroup:
    """Observations from one location sorted by rainfall."""

    location: str
    observations: List[Observation]
    average_rainfall: Optional[float]  # None when no rainfall was recorded


@dataclass
class TableStatistics:
    fishing_days: int
    fishing_days_with_direction: int
    location_counts: Dict[str, int]
    rainy_warm_days: int
    normal_pressure_days: int

    @property
    def location_group_count(self) -> int:
        return len(self.location_counts)

    def report(self) -> str:
        return statistics_report(
            fishing_days=self.fishing_days,
            fishing_days_with_direction=self.fishing_days_with_direction,
            location_counts=self.location_counts,
            rainy_warm_days=self.rainy_warm_days,
            normal_pressure_days=self.normal_pressure_days,
        )


def _readings_array(readings: Sequence[Reading]) -> np.ndarray:
    """Float array of readings with NaN where a reading is missing."""
    return np.array(
        [np.nan if r.missing else r.value for r in readings],
        dtype=float,
    )


class Table:
    """Immutable collection of observations parsed from a delimited file.

    Args:
        lines: Decoded text lines.  Line 0 is the header; every other
            line is a candidate data row.
        fmt: Number formatting used by report lines.

    Blank data lines are rejected and counted in ``rejected_count``;
    they never abort the load.
    """

    def __init__(self, lines: Sequence[str], fmt: FormatConfig = DEFAULT_FORMAT):
        self.fmt = fmt
        self._observations: List[Observation] = []
        self.rejected_count = 0

        if not lines:
            self.header_line = ""
            self.column_names: tuple = ()
            self.field_count = 0
            self.layout = ColumnLayout(names=(), widths=())
            self.renderer = TextTableRenderer(self.layout)
            return

        self.header_line = lines[0]
        self.column_names = tuple(lines[0].strip().split(FIELD_DELIMITER))
        self.field_count = len(self.column_names)

        for line in lines[1:]:
            observation = parse_observation(line, self.field_count)
            if observation is None:
                self.rejected_count += 1
                continue
            self._observations.append(observation)

        self.layout = compute_layout(
            self.column_names, (o.fields for o in self._observations)
        )
        self.renderer = TextTableRenderer(self.layout)
        logger.info(
            "Loaded %d observations (%d rows rejected, %d columns)",
            len(self._observations), self.rejected_count, self.field_count,
        )

    @property
    def observations(self) -> List[Observation]:
        return list(self._observations)

    @property
    def table_width(self) -> int:
        return self.layout.table_width

    def __len__(self) -> int:
        return len(self._observations)

    def locations(self) -> List[str]:
        """Distinct locations in lexicographic order."""
        return sorted({o.location for o in self._observations})

    def years(self) -> List[int]:
        return sorted({o.year for o in self._observations})

    # -- rendering helpers ------------------------------------------------

    def to_csv(self, observations: Sequence[Observation]) -> str:
        lines = [self.header_line]
        lines.extend(o.raw for o in observations)
        return "\n".join(lines) + "\n"

    def render(self, observations: Sequence[Observation], head_tail: int = -1) -> str:
        return self.renderer.render([o.fields for o in observations], head_tail)

    # -- queries ----------------------------------------------------------

    def filter_by_location_and_years(
        self,
        location: str,
        years: Collection[int],
        head_tail: int = TABLE_HEAD_TAIL,
    ) -> QueryResult:
        """Observations at *location* (exact match) in any of *years*, in file order."""
        wanted = set(years)
        selected = [
            o for o in self._observations
            if o.location == location and o.year in wanted
        ]
        logger.debug("Location %r, years %s: %d observations", location, sorted(wanted), len(selected))
        return QueryResult(
            observations=selected,
            text=self.render(selected, head_tail),
            csv=self.to_csv(selected),
        )

    def group_by_location(self) -> List[LocationGroup]:
        """One group per location, each sorted by rainfall (missing last)."""
        by_location: Dict[str, List[Observation]] = {}
        for o in self._observations:
            by_location.setdefault(o.location, []).append(o)

        groups = []
        for location in sorted(by_location):
            members = sorted(by_location[location], key=cmp_to_key(compare_rainfall))
            present = [o.rainfall.value for o in members if o.rainfall.present]
            average = float(np.mean(present)) if present else None
            groups.append(LocationGroup(location, members, average))
        return groups

    def rainfall_by_location(self, head_tail: int = GROUP_HEAD_TAIL) -> QueryResult:
        """Per-location rainfall ranking with the average rainfall of each group."""
        groups = self.group_by_location()
        renderer = self.renderer

        body = []
        ordered: List[Observation] = []
        for group in groups:
            summary = average_rainfall_line(group.location, group.average_rainfall, self.fmt)
            body.append(renderer.summary_line(summary) + "\n")
            body.append(renderer.border_line() + "\n")
            body.append(renderer.render_partial([o.fields for o in group.observations], head_tail))
            body.append(renderer.border_line() + "\n")
            ordered.extend(group.observations)

        return QueryResult(
            observations=ordered,
            text=renderer.render_from_content("".join(body), closing_border=False),
            csv=self.to_csv(ordered),
            groups=groups,
        )

    def longest_sunshine(self, head_tail: int = TABLE_HEAD_TAIL) -> QueryResult:
        """Observations with at least MIN_SUNSHINE_HOURS of sunshine and the longest one.

        Ties go to the first observation in file order.  When nothing
        qualifies, ``longest`` is None and the report says so.
        """
        selected = [
            o for o in self._observations
            if o.sunshine.present and o.sunshine.value >= MIN_SUNSHINE_HOURS
        ]

        longest = None
        for o in selected:
            if longest is None or o.sunshine.value > longest.sunshine.value:
                longest = o

        if longest is None:
            report = longest_sunshine_report(None, None, None, self.fmt)
        else:
            report = longest_sunshine_report(
                longest.date_label,
                longest.sunshine.value,
                longest.max_temp.token,
                self.fmt,
            )

        return QueryResult(
            observations=selected,
            text=report + self.render(selected, head_tail),
            csv=self.to_csv(selected),
            report=report,
            longest=longest,
        )

    # -- statistics -------------------------------------------------------

    def count_fishing_days(self) -> int:
        """Days with a present afternoon wind speed below FISHING_MAX_WIND_SPEED."""
        return int(np.count_nonzero(self._calm_mask()))

    def count_fishing_days_with_direction(self) -> int:
        """Calm days whose afternoon wind blew from one of FISHING_WIND_DIRECTIONS."""
        directions = np.array(
            [o.wind_dir.upper() in FISHING_WIND_DIRECTIONS for o in self._observations],
            dtype=bool,
        )
        return int(np.count_nonzero(self._calm_mask() & directions))

    def count_by_location(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for o in self._observations:
            counts[o.location] = counts.get(o.location, 0) + 1
        return {location: counts[location] for location in sorted(counts)}

    def count_rainy_warm_days(self) -> int:
        """Days with rain today and a present max temperature of at least WARM_DAY_MIN_TEMP."""
        temps = _readings_array([o.max_temp for o in self._observations])
        rain = np.array([o.rain_today for o in self._observations], dtype=bool)
        with np.errstate(invalid="ignore"):
            warm = temps >= WARM_DAY_MIN_TEMP
        return int(np.count_nonzero(warm & rain))

    def count_normal_pressure_days(self) -> int:
        low, high = NORMAL_PRESSURE_RANGE
        pressure = _readings_array([o.pressure for o in self._observations])
        with np.errstate(invalid="ignore"):
            normal = (pressure >= low) & (pressure <= high)
        return int(np.count_nonzero(normal))

    def statistics(self) -> TableStatistics:
        return TableStatistics(
            fishing_days=self.count_fishing_days(),
            fishing_days_with_direction=self.count_fishing_days_with_direction(),
            location_counts=self.count_by_location(),
            rainy_warm_days=self.count_rainy_warm_days(),
            normal_pressure_days=self.count_normal_pressure_days(),
        )

    def statistics_report(self) -> str:
        return self.statistics().report()

    def _calm_mask(self) -> np.ndarray:
        speeds = _readings_array([o.wind_speed for o in self._observations])
        with np.errstate(invalid="ignore"):
            return speeds < FISHING_MAX_WIND_SPEED
