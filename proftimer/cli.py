#!filepath: proftimer/cli.py
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from proftimer import AppConfig, Profiler, __version__, init_logging, logs
from proftimer.observability.summary import SeriesSummary

app = typer.Typer(help="proftimer profiling CLI")


def _workload(size: int) -> int:
    total = 0
    for i in range(size):
        total += i * i
    return total


def render_table(summaries: List[SeriesSummary], precision: int = 6) -> Table:
    table = Table(title="Profile summary")
    table.add_column("name", no_wrap=True)
    for col in ("count", "total", "mean", "min", "max", "std"):
        table.add_column(col, justify="right")

    for s in summaries:
        table.add_row(
            s.name,
            str(s.count),
            f"{s.total:.{precision}f}",
            f"{s.mean:.{precision}f}",
            f"{s.minimum:.{precision}f}",
            f"{s.maximum:.{precision}f}",
            f"{s.std:.{precision}f}",
        )
    return table


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
@logs.catch(msg="demo failed")
def demo(
    names: int = typer.Option(3, min=1, help="number of timed keys"),
    events: int = typer.Option(100, min=1, help="records per key"),
    config: Optional[str] = typer.Option(None, help="YAML config path"),
):
    """
    用一个小 workload 驱动 Profiler，并打印每个 key 的统计。
    """
    cfg = AppConfig.load(config)
    init_logging(cfg.log)

    profiler = Profiler(name_width=cfg.profiling.name_width, precision=cfg.profiling.precision)
    profiler.reset_and_preallocate(
        max(names, cfg.profiling.prealloc_names),
        max(events, cfg.profiling.prealloc_events),
    )

    keys = [f"workload_{i}" for i in range(names)]
    for i, key in enumerate(keys):
        for _ in range(events):
            profiler.start_timer(key)
            _workload(1000 * (i + 1))
            profiler.record(key)

    summaries = profiler.print_group_summary(keys)
    print(render_table(summaries, cfg.profiling.precision))


if __name__ == "__main__":
    app()

# python -m proftimer.cli demo --names 3 --events 100
