"""FastAPI dependency injection for arena services."""

from typing import Annotated

from fastapi import Depends

from arena.application.commands import EditCourtCommand, GenerateCourtCommand
from arena.domain import BomCalculator


def get_bom_calculator() -> BomCalculator:
    return BomCalculator()


def get_edit_command(
    calculator: Annotated[BomCalculator, Depends(get_bom_calculator)],
) -> EditCourtCommand:
    """Dependency for EditCourtCommand."""
    return EditCourtCommand(bom_calculator=calculator)


def get_generate_command(
    calculator: Annotated[BomCalculator, Depends(get_bom_calculator)],
    edit_command: Annotated[EditCourtCommand, Depends(get_edit_command)],
) -> GenerateCourtCommand:
    """Dependency for GenerateCourtCommand."""
    return GenerateCourtCommand(bom_calculator=calculator, edit_command=edit_command)


# Type aliases for cleaner endpoint signatures
BomCalculatorDep = Annotated[BomCalculator, Depends(get_bom_calculator)]
EditCommandDep = Annotated[EditCourtCommand, Depends(get_edit_command)]
GenerateCommandDep = Annotated[GenerateCourtCommand, Depends(get_generate_command)]
