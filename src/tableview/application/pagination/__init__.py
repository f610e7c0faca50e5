"""Application pagination – page, request and coordinator primitives."""
from tableview.application.pagination.coordinator import PaginationCoordinator
from tableview.application.pagination.page import Page, PaginationState, total_pages_for
from tableview.application.pagination.page_request import PageRequest

__all__ = ["Page", "PageRequest", "PaginationCoordinator", "PaginationState", "total_pages_for"]
