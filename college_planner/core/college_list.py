"""College list tracker: catalog search, list grouping, add and remove."""

from typing import Any

from college_planner.core.logging import get_logger
from college_planner.core.schemas_colleges import (
    College,
    CollegeCategory,
    CollegeListEntry,
    CollegeListEntryCreate,
    CollegeListItem,
    CollegeListResponse,
)
from college_planner.db.colleges import (
    create_college_list_entry,
    delete_college_list_entry,
    get_college,
    get_college_list_entry,
    list_active_colleges,
    list_student_colleges,
)

logger = get_logger(__name__)


class DuplicateCollegeError(Exception):
    """Raised when a college is already on the student's list."""

    def __init__(self, college_id: str):
        super().__init__("College already on your list")
        self.college_id = college_id


class CollegeNotFoundError(Exception):
    """Raised when a catalog college or list entry does not exist for the student."""


def search_colleges(colleges: list[dict[str, Any]], query: str | None) -> list[dict[str, Any]]:
    """
    Filter catalog colleges by a case-insensitive substring.

    Matches against name, city and state. A blank query returns every college.
    """
    if not query or not query.strip():
        return list(colleges)

    needle = query.strip().lower()
    matches = []
    for college in colleges:
        haystacks = (college.get("name"), college.get("city"), college.get("state"))
        if any(h and needle in str(h).lower() for h in haystacks):
            matches.append(college)
    return matches


def group_by_category(
    entries: list[dict[str, Any]],
    catalog: list[dict[str, Any]],
) -> CollegeListResponse:
    """Group list entries by Reach/Target/Safety, joined with their catalog record."""
    by_id = {c["id"]: c for c in catalog}
    grouped: dict[CollegeCategory, list[CollegeListItem]] = {c: [] for c in CollegeCategory}

    for entry in entries:
        college = by_id.get(entry.get("college_id"))
        item = CollegeListItem(
            **entry,
            college=College(**college) if college else None,
        )
        grouped[item.category].append(item)

    return CollegeListResponse(
        total=len(entries),
        reach=grouped[CollegeCategory.REACH],
        target=grouped[CollegeCategory.TARGET],
        safety=grouped[CollegeCategory.SAFETY],
    )


def get_catalog(query: str | None = None, limit: int = 100) -> list[College]:
    """Active catalog colleges filtered by the search query."""
    return [College(**c) for c in search_colleges(list_active_colleges(limit), query)]


def get_college_list(email: str, catalog_limit: int = 100) -> CollegeListResponse:
    """The student's list grouped by category."""
    return group_by_category(list_student_colleges(email), list_active_colleges(catalog_limit))


def add_college(email: str, data: CollegeListEntryCreate) -> CollegeListEntry:
    """
    Add a catalog college to the student's list.

    Raises:
        DuplicateCollegeError: If the college is already on the list
        CollegeNotFoundError: If the college is unknown or inactive
    """
    existing = list_student_colleges(email)
    if any(entry.get("college_id") == data.college_id for entry in existing):
        raise DuplicateCollegeError(data.college_id)

    college = get_college(data.college_id)
    if not college or not college.get("is_active", True):
        raise CollegeNotFoundError(f"College {data.college_id} not found")

    row = create_college_list_entry(
        email=email,
        college_id=data.college_id,
        category=data.category.value,
        application_type=data.application_type.value,
    )
    logger.info(
        f"Added college {data.college_id} to list",
        extra={"extra_data": {"category": data.category.value}},
    )
    return CollegeListEntry(**row)


def remove_college(email: str, entry_id: str) -> None:
    """
    Remove an entry from the student's list.

    Raises:
        CollegeNotFoundError: If the entry does not exist or belongs to someone else
    """
    entry = get_college_list_entry(entry_id)
    if not entry or entry.get("student_email") != email:
        raise CollegeNotFoundError(f"College list entry {entry_id} not found")

    delete_college_list_entry(entry_id)
    logger.info(f"Removed college list entry {entry_id}")
