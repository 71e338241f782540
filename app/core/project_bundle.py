"""Assemble a project and its satellite records into one bundle."""

from app.core.errors import NotFoundError
from app.core.schemas_evaluation import EvaluationResultsResponse
from app.core.schemas_financial import FinancialProjectionsResponse
from app.core.schemas_market_analysis import MarketAnalysisResponse
from app.core.schemas_product_details import ProductDetailsResponse
from app.core.schemas_projects import ProjectBundle, ProjectResponse
from app.db import satellites
from app.db.projects import get_project


def load_project_bundle(project_id: int, include_evaluation: bool = True) -> ProjectBundle:
    """
    Load a project with whichever satellite records exist.

    Args:
        project_id: Project id
        include_evaluation: Whether to read evaluation results as well

    Returns:
        ProjectBundle; absent satellites are None

    Raises:
        NotFoundError: If the project does not exist
    """
    project = get_project(project_id)
    if not project:
        raise NotFoundError("Project not found")

    market = satellites.get_for_project(satellites.MARKET_ANALYSIS, project_id)
    product = satellites.get_for_project(satellites.PRODUCT_DETAILS, project_id)
    financial = satellites.get_for_project(satellites.FINANCIAL_PROJECTIONS, project_id)
    evaluation = (
        satellites.get_for_project(satellites.EVALUATION_RESULTS, project_id)
        if include_evaluation
        else None
    )

    return ProjectBundle(
        project=ProjectResponse.model_validate(project),
        market_analysis=MarketAnalysisResponse.model_validate(market) if market else None,
        product_details=ProductDetailsResponse.model_validate(product) if product else None,
        financial_projections=(
            FinancialProjectionsResponse.model_validate(financial) if financial else None
        ),
        evaluation_results=(
            EvaluationResultsResponse.model_validate(evaluation) if evaluation else None
        ),
    )
