from __future__ import annotations

from ..domain.entities import CellModel, CompanyLogo, DisclaimerItem, DisclaimerRow, SectionIdentifier
from .base import SectionBase


def default_disclaimer_rows() -> list[DisclaimerRow]:
    return [CompanyLogo(0), DisclaimerItem.MAIN_DISCLAIMER, DisclaimerItem.COPYRIGHT, CompanyLogo(1)]


class DisclaimersSection(SectionBase[DisclaimerRow]):
    """Static legal footer; rows are fixed at construction and never change."""

    identifier = SectionIdentifier.DISCLAIMERS

    def __init__(self) -> None:
        super().__init__()
        self._elements = default_disclaimer_rows()

    def _cell_for(self, element: DisclaimerRow) -> CellModel:
        if isinstance(element, CompanyLogo):
            return CellModel("companyLogo")
        if element is DisclaimerItem.MAIN_DISCLAIMER:
            return CellModel("main disclaimer")
        return CellModel("This is the copyright text")


__all__ = ["DisclaimersSection", "default_disclaimer_rows"]
