"""
Run the form validation engine against a form document.

Reads:
  - form_io/form.json              (form document, or the first CLI argument)

Produces:
  - form_io/validation_result.json (feedback + rendered panel, or the second CLI argument)
"""
import json
import logging
import sys
from pathlib import Path

from jsonschema import validate as validate_schema

from formgate.config import settings
from formgate.config.constants import RETURN_HTML
from formgate.config.schemas import FEEDBACK_RESULT_SCHEMA
from formgate.engine.pipeline import failing_field_ids, validate
from formgate.presentation.document import FormDocument
from formgate.presentation.events import SubmitEvent
from formgate.presentation.renderer import PanelRenderer

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_validation")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "form_io"

FORM_FILE = Path(sys.argv[1]) if len(sys.argv) > 1 else IO_DIR / "form.json"
OUTPUT_FILE = Path(sys.argv[2]) if len(sys.argv) > 2 else IO_DIR / "validation_result.json"

# ---------------------------------------------------------------------------
# Load input
# ---------------------------------------------------------------------------
logger.info("Loading form document from %s", FORM_FILE)
document = FormDocument.from_json_file(FORM_FILE)
logger.info("Form root          : %s", document.root_id)

# ---------------------------------------------------------------------------
# Run pipeline
# ---------------------------------------------------------------------------
renderer = PanelRenderer(document)
event = SubmitEvent(target_id=document.root_id)

feedback = validate(
    document.root_id,
    document,
    options={"returnType": RETURN_HTML, "listFields": True, "stopOnFail": True},
    renderer=renderer,
    event=event,
)

result = {
    "feedback": feedback.to_dict(),
    "submit_cancelled": event.default_prevented,
    "panel_html": renderer.to_html(document.root_id),
    "document": document.to_dict(),
}
validate_schema(instance=result["feedback"], schema=FEEDBACK_RESULT_SCHEMA)

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(result, f, ensure_ascii=False, indent=2)

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("FORM VALIDATION RESULT")
print("=" * 70)
print(f"form        : {document.root_id}")
print(f"success     : {feedback.success}")
print(f"status      : {feedback.status}")
print(f"cancelled   : {event.default_prevented}")

if not feedback.success:
    print(f"\nImplicated fields ({len(feedback.error_fields)}):")
    for field_id in failing_field_ids(feedback):
        print(f"  {field_id:20s} {document.label_for(field_id)}")
    print(f"\nPanel: {result['panel_html']}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
