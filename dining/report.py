def format_report(config, stats):
    """Renders the run settings and the per-philosopher results as text."""
    lines = [
        "=== Dining Philosophers ===",
        f"Philosophers: {config.philosophers}",
        f"Duration: {config.duration_sec} s",
        f"Think: {config.think_min_ms}-{config.think_max_ms} ms",
        f"Eat: {config.eat_min_ms}-{config.eat_max_ms} ms",
        f"Variant: {config.variant}",
        "",
        "=== Results ===",
    ]
    for slot in stats:
        meals, wait = slot.read()
        lines.append(
            f"Philosopher {slot.philosopher_id}: meals={meals}, "
            f"total_wait_ms={wait}, avg_wait_ms={slot.average_wait_ms:.2f}"
        )
    lines.append("")
    lines.append(f"Variant used: {config.variant} (last philosopher reaches left first).")
    return "\n".join(lines)
