#!filepath: kfold_cv/cli.py
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from kfold_cv import __version__, init_logging
from kfold_cv.config.app_config import AppConfig
from kfold_cv.utils.errors import CrossValidationError, UserInputError

app = typer.Typer(help="k-fold cross-validation CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    config: Path = typer.Argument(..., help="YAML config file"),
    k: Optional[int] = typer.Option(None, "--k", help="Override cv.k"),
    metric: Optional[str] = typer.Option(None, "--metric", help="Override cv.metric"),
):
    """
    Cross-validate the configured estimator on the configured CSV.
    """
    from kfold_cv.workflows.cross_validate import run_cross_validation

    try:
        cfg = AppConfig.load(str(config))
    except FileNotFoundError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if k is not None:
        cfg.cv.k = k
    if metric is not None:
        cfg.cv.metric = metric

    init_logging(cfg.log)

    print(f"[green]Running {cfg.cv.k}-fold CV: {cfg.model.family} on {cfg.data.path}[/green]")

    try:
        result = run_cross_validation(cfg)
    except (UserInputError, CrossValidationError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"{cfg.cv.metric} per fold")
    table.add_column("fold", justify="right")
    table.add_column("score", justify="right")
    for i, score in enumerate(result.fold_scores):
        table.add_row(str(i), f"{score:.6f}")
    print(table)
    print(f"mean {cfg.cv.metric}: [bold]{result.mean_score:.6f}[/bold]")


if __name__ == "__main__":
    app()

# python -m kfold_cv.cli run kfold_cv/config/base.yml --k 10
