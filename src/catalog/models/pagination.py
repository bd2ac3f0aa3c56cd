"""Pagination models."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from catalog.utils.constants import DEFAULT_PAGE_SIZE, LAST_PAGE_LABEL, NEXT_PAGE_LABEL


class PaginationState(BaseModel):
    """Snapshot of the paginator for one matching set.

    ``current_page`` is None while there are no results.
    """

    model_config = ConfigDict(frozen=True)

    page_size: StrictInt = Field(DEFAULT_PAGE_SIZE, ge=1)
    total_count: StrictInt = Field(0, ge=0)
    page_count: StrictInt = Field(0, ge=0)
    current_page: StrictInt | None = Field(None, ge=1)

    @property
    def is_empty(self) -> bool:
        return self.page_count == 0

    @property
    def has_next(self) -> bool:
        return self.current_page is not None and self.current_page < self.page_count

    @property
    def pages(self) -> list[int]:
        return list(range(1, self.page_count + 1))

    @property
    def start_index(self) -> int:
        """Index of the first visible item in the matching set."""
        if self.current_page is None:
            return 0
        return (self.current_page - 1) * self.page_size

    @property
    def end_index(self) -> int:
        """Exclusive index one past the last visible item."""
        if self.current_page is None:
            return 0
        return min(self.current_page * self.page_size, self.total_count)


class PageControl(BaseModel):
    """One navigation control as handed to the display surface."""

    label: StrictStr = Field(..., description="Text shown on the control")
    page: StrictInt = Field(..., description="Page opened when the control is selected")
    kind: StrictStr = Field("page", description="One of: page, next, last")
    active: StrictBool = Field(False, description="Whether this is the current page")


class PaginationInfo(BaseModel):
    """Pagination metadata for browse responses."""

    page_size: StrictInt = Field(..., description="Maximum number of items per page")
    total_count: StrictInt = Field(..., description="Number of items matching the filters")
    page_count: StrictInt = Field(..., description="Number of pages for the matching items")
    current_page: StrictInt | None = Field(
        None,
        description="Currently displayed page, absent when nothing matches",
    )
    has_next: StrictBool = Field(..., description="Whether a page follows the current one")
    controls: list[PageControl] = Field(default_factory=list)
    message: StrictStr | None = Field(
        None,
        description="Placeholder text shown instead of controls when nothing matches",
    )


def build_page_controls(state: PaginationState) -> list[PageControl]:
    """Navigation controls for ``state``: one per page, then next and last.

    Exactly one numbered control is active. No controls without results.
    """
    if state.is_empty or state.current_page is None:
        return []

    controls = [
        PageControl(label=str(page), page=page, active=page == state.current_page)
        for page in state.pages
    ]
    next_target = state.current_page + 1 if state.has_next else state.current_page
    controls.append(PageControl(label=NEXT_PAGE_LABEL, page=next_target, kind="next"))
    controls.append(PageControl(label=LAST_PAGE_LABEL, page=state.page_count, kind="last"))
    return controls
