"""
Google Slides Deck MCP Server

FastMCP server exposing the deck-building tools to an LLM client: extract a
company's row from a CSV file, create a presentation for that company, and add
custom Paragraph or Bullet slides to it. Every tool answers with a text
message; failures are reported, never raised.
"""

import json
import logging

from mcp.server.fastmcp import FastMCP

from company_data import lookup
from config import SlidesConfig
from errors import ValidationError
from google_auth import authorize
from logging_utils import setup_logging
from models import parse_style
from presentation_orchestrator import build_presentation
from session_state import SessionState
from slide_composer import SlideComposer

logger = logging.getLogger(__name__)

# Initialize FastMCP server
slides_mcp = FastMCP(SlidesConfig.MCP_SERVER_NAME)

# One session per server process; MCP tool calls over stdio arrive one at a time
session = SessionState()
composer = SlideComposer()
_extracted_records = {}

EXTRACT_COMPANY_DATA_DESCRIPTION = """Extract one company's data from a CSV file.
Pass the CSV file path the user gave you and the name of exactly ONE company.
Call this before create-presentation. If it is unclear which company the user
means, ask them first.

Returns one JSON object for the company: each key is a CSV header and each
value is that row's cell, for example
{"companyName": "...", "location": "...", "industry": "...", "keyMetrics": "..."}.
Keep this data; it is the context for every custom slide you write."""

CREATE_PRESENTATION_DESCRIPTION = """Create a Google Slides presentation for ONE company in the user's account.
Call extract-company-data first. The only parameter is the company name, which
becomes the presentation title.

Returns the presentationId of the new presentation. Remember it: add-custom-slide
needs it."""

ADD_CUSTOM_SLIDE_DESCRIPTION = """Add a custom slide to an existing presentation.
If you do not have the company's data yet, call extract-company-data first and
write the slide from it.

Parameters:
- slide_title: a title you write for the slide.
- slide_content: the text you compose for the slide. For Bullet slides put each
  bullet on its own line ('\\n').
- presentation_id: the id returned by create-presentation. Do not create a new
  presentation for this.
- slide_type: the literal string 'Paragraph' or 'Bullet'. If the user has not
  said which, ask them before calling this tool."""


def _remember_record(company_name: str, record: dict) -> None:
    key = company_name.strip().lower()
    _extracted_records.pop(key, None)
    _extracted_records[key] = record
    # Oldest extraction goes first once the cache is full
    while len(_extracted_records) > SlidesConfig.MAX_CACHED_RECORDS:
        _extracted_records.pop(next(iter(_extracted_records)))


@slides_mcp.tool(name="extract-company-data", description=EXTRACT_COMPANY_DATA_DESCRIPTION)
def extract_company_data(company_name: str, csv_file: str) -> str:
    try:
        record = lookup(company_name, csv_file)
    except Exception as e:
        logger.warning(f"⚠️ extract-company-data failed: {e}")
        return f"An error occurred while extracting company data:\n{e}"

    if record is None:
        return f'No company found with the name "{company_name}"'

    _remember_record(company_name, record)
    return json.dumps(record, ensure_ascii=False)


@slides_mcp.tool(name="create-presentation", description=CREATE_PRESENTATION_DESCRIPTION)
def create_presentation(company_name: str) -> str:
    try:
        record = _extracted_records.get((company_name or "").strip().lower())
        presentation_id = build_presentation(
            company_name, session=session, authorizer=authorize, record=record, composer=composer
        )
        session.prune_populated()
    except Exception as e:
        logger.error(f"❌ create-presentation: Error creating presentation: {e}")
        return f"Failed to create presentation\n{e}"

    return f"Presentation ID: {presentation_id}"


@slides_mcp.tool(name="add-custom-slide", description=ADD_CUSTOM_SLIDE_DESCRIPTION)
def add_custom_slide(slide_title: str, slide_content: str, presentation_id: str, slide_type: str) -> str:
    try:
        style = parse_style(slide_type)
    except ValidationError:
        return (
            "add-custom-slide: Invalid slideType parameter. You must pass in either "
            "'Paragraph' or 'Bullet' as literal strings."
        )

    try:
        if session.client is None:
            session.set_client(authorize())
        composer.add_slide(session, slide_title, slide_content, presentation_id, style)
        session.prune_populated()
    except Exception as e:
        logger.error(f"❌ add-custom-slide failed: {e}")
        return f"There was an error creating a custom slide:\n{e}"

    return "Successfully created a new custom slide!"


def main() -> None:
    setup_logging(SlidesConfig.LOG_DIR, SlidesConfig.LOG_LEVEL)
    logger.info("Google Slides MCP Server: opening stdio transport...")
    slides_mcp.run()


if __name__ == "__main__":
    main()
