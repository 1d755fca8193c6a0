# SPDX-License-Identifier: Apache-2.0
"""Command line interface for DentalAI."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from PIL import Image
from rich.console import Console
from rich.markup import escape

from dentalai import __version__
from dentalai.analyze.engine import BiteAnalyzer
from dentalai.config import Config, load_config
from dentalai.errors import DetectorError
from dentalai.report.formatting import format_for_storage, to_bite_analysis_row
from dentalai.report.recommendations import generate_recommendations
from dentalai.schemas import AnalysisResult
from dentalai.tools.make_sample import make_sample
from dentalai.utils.io import ensure_dir, load_keypoints, write_json
from dentalai.utils.text import to_fixed
from dentalai.visualize.overlay import BiteAnalysisVisualizer
from dentalai.visualize.renderer import PillowRenderer

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """DentalAI bite analysis command line interface."""


def _run(cfg: Config, keypoints: Optional[Path], image: Optional[Path], output_dir: Path, image_url: str) -> AnalysisResult:
    ensure_dir(output_dir)
    photo = Image.open(image).convert("RGB") if image else Image.new("RGB", (cfg.render.width, cfg.render.height), (128, 128, 128))

    if keypoints is not None:
        result = BiteAnalyzer(config=cfg.analysis).analyze(load_keypoints(keypoints))
    else:
        from dentalai.vision.detector import MediaPipeFaceMeshDetector

        with MediaPipeFaceMeshDetector(cfg.detector) as detector:
            result = BiteAnalyzer(detector, cfg.analysis).analyze_image(photo)

    renderer = PillowRenderer(cfg.render.width, cfg.render.height)
    BiteAnalysisVisualizer(renderer, cfg.render).render(photo, result)
    renderer.save(output_dir / "overlay.png")
    result.to_json(output_dir / "result.json")
    if not result.success:
        return result

    write_json(output_dir / "analysis.json", format_for_storage(result))
    write_json(
        output_dir / "recommendations.json",
        generate_recommendations(result, cfg.report.midline_deviation_deg),
    )
    if image_url:
        write_json(output_dir / "bite_analysis_row.json", to_bite_analysis_row(result, image_url))
    return result


def _report(result: AnalysisResult, output_dir: Path) -> None:
    if not result.success:
        console.print(f"[red]Error: {result.error}")
        raise typer.Exit(code=1)
    console.print(
        f"DentalAI v{__version__}: face shape {result.face_shape.shape.value}, "
        f"midline {to_fixed(result.midline.angle)}° ({output_dir})"
    )


@app.command("analyze")
def analyze(
    output_dir: Path = typer.Option(..., help="Directory to store artifacts"),
    keypoints: Optional[Path] = typer.Option(None, help="Keypoint JSON from a landmark detector"),
    image: Optional[Path] = typer.Option(None, help="Face photo; detected with MediaPipe unless --keypoints is given"),
    image_url: str = typer.Option("", help="Stored photo URL for the bite analysis row"),
    config: Optional[Path] = typer.Option(None, help="YAML configuration file"),
) -> None:
    """Analyse one face and write the overlay, storage record and recommendations."""
    if keypoints is None and image is None:
        console.print("[red]Error: pass --keypoints or --image")
        raise typer.Exit(code=2)
    cfg = load_config(config)
    try:
        result = _run(cfg, keypoints, image, output_dir, image_url)
    except (DetectorError, OSError, ValueError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}")
        raise typer.Exit(code=1)
    _report(result, output_dir)


@app.command("recommend")
def recommend(result_path: Path = typer.Argument(..., help="result.json written by 'analyze'")) -> None:
    """Print the recommendations for a saved analysis."""
    try:
        result = AnalysisResult.from_json(result_path)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}")
        raise typer.Exit(code=1)
    for line in generate_recommendations(result, load_config().report.midline_deviation_deg):
        console.print(line)


@app.command("demo")
def demo(output_dir: Path = typer.Option(Path("outputs/demo"), help="Directory to store artifacts")) -> None:
    """Run the synthetic sample end to end."""
    sample = make_sample(output_dir / "sample")
    cfg = load_config()
    result = _run(cfg, sample / "keypoints.json", sample / "image.png", output_dir, "")
    _report(result, output_dir)


if __name__ == "__main__":  # pragma: no cover
    app()
