from typing import List
from core.bed import Bed, BedState
from core.ward import Ward
from utils.bed_utils import compose_bed_number


def format_bed(bed: Bed) -> str:
    """One listing line, e.g. `Bed 101: OCCUPIED - Maria Garcia (10001) [INFECTIOUS]`."""
    if bed.state is BedState.OCCUPIED:
        p = bed.patient
        line = f"Bed {bed.number}: OCCUPIED - {p.name} ({p.clinical_record_number})"
        if p.is_infected:
            line += " [INFECTIOUS]"
        if p.is_vip:
            line += " [VIP]"
        return line
    return f"Bed {bed.number}: {bed.state.value}"


def format_ward(ward: Ward) -> List[str]:
    """Render every bed, unit by unit in configured order and by index within each unit."""
    beds = {bed.number: bed for bed in ward.iter_beds()}
    lines = []
    for unit in ward.config.units:
        lines.append("")
        lines.append(f"--- Unit {unit} ---")
        for idx in range(ward.config.first_bed_index, ward.config.last_bed_index + 1):
            bed = beds.get(compose_bed_number(unit, idx))
            if bed is not None:
                lines.append(format_bed(bed))
    return lines


def format_summary(ward: Ward) -> str:
    occupied, vacant, blocked = ward.count_beds_by_state()
    return f"Summary: {occupied} occupied, {vacant} vacant, {blocked} blocked"


def format_bed_list(bed_numbers: List[int], limit: int = 10) -> str:
    """Comma separated bed numbers, truncated with '...' after `limit` entries."""
    shown = ", ".join(str(n) for n in bed_numbers[:limit])
    if len(bed_numbers) > limit:
        shown += " ..."
    return shown
