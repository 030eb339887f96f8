import argparse
import json
import logging
import os
import re
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from recipe_importer import RecipeImporter
from recipe_models import Recipe
from recipe_parser import parse_recipe_text

log = logging.getLogger(__name__)

AUDIO_SUFFIXES = {".mp3", ".m4a", ".wav", ".webm", ".ogg", ".flac", ".mp4"}
DEFAULT_WHISPER_MODEL = "small"


def transcribe(audio_path: Path, model_name: Optional[str] = None) -> str:
    import whisper

    model = whisper.load_model(model_name or os.getenv("WHISPER_MODEL", DEFAULT_WHISPER_MODEL))
    result = model.transcribe(str(audio_path), language="en")
    return result.get("text", "").strip()


def read_transcript(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise SystemExit(f"No such transcript or audio file: {source}")
    if path.suffix.lower() in AUDIO_SUFFIXES:
        log.info("Transcribing %s", path)
        return transcribe(path)
    return path.read_text(encoding="utf-8")


def load_recipe(path: str) -> Recipe:
    recipe_path = Path(path)
    if not recipe_path.is_file():
        raise SystemExit(f"No such recipe file: {path}")
    with open(recipe_path, encoding="utf-8") as f:
        return Recipe.from_dict(json.load(f))


def render_markdown(recipe: Recipe) -> str:
    md = [f"# {recipe.title}", ""]
    details = []
    if recipe.prep_time:
        details.append(f"- Prep time: {recipe.prep_time}")
    if recipe.cook_time:
        details.append(f"- Cook time: {recipe.cook_time}")
    if recipe.servings:
        details.append(f"- Servings: {recipe.servings}")
    if details:
        md.extend(details)
        md.append("")
    md.append("## Ingredients")
    for ing in recipe.ingredients:
        md.append(f"- {ing}")
    md.append("")
    md.append("## Instructions")
    for i, step in enumerate(recipe.instructions, 1):
        md.append(f"{i}. {step}")
    return "\n".join(md).strip() + "\n"


def output_stem(title: str) -> str:
    stem = re.sub(r"\s+", " ", title).replace("/", "-").strip()[:80]
    return stem or "recipe"


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    ap = argparse.ArgumentParser(description="Turn a spoken recipe transcript (or recording) into a structured recipe.")
    ap.add_argument("source", help="Transcript text file, audio recording, or - for stdin")
    ap.add_argument("--out-dir", default=os.getenv("RECIPE_OUT_DIR", "./out"), help="Output directory for Markdown and JSON files")
    ap.add_argument("--from", dest="recipient", default=None, help="Name of the person who recorded the recipe")
    ap.add_argument("--into", default=None, help="Existing recipe JSON to update instead of creating a new recipe")
    ap.add_argument("--json-only", action="store_true", help="Skip the Markdown file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    transcript = read_transcript(args.source)
    if not transcript.strip():
        raise SystemExit("Transcript is empty, nothing to parse.")

    draft = parse_recipe_text(transcript)
    importer = RecipeImporter()
    if args.into:
        recipe = importer.merge(load_recipe(args.into), draft)
    else:
        recipe = importer.build(draft, recipient_name=args.recipient)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = output_stem(recipe.title)

    json_path = out_dir / f"{stem}.json"
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(recipe.to_dict(), f, ensure_ascii=False, indent=2)

    print("Done.")
    print("JSON:", json_path)
    if not args.json_only:
        md_path = out_dir / f"{stem}.md"
        with open(md_path, "w", encoding="utf-8") as f:
            f.write(render_markdown(recipe))
        print("Markdown:", md_path)


if __name__ == "__main__":
    main()
