"""Prompt construction for AI business recommendations."""

import json

from app.core.schemas_projects import ProjectBundle

ANALYSIS_CLOSING = (
    "Please provide a comprehensive business analysis and recommendations based on this "
    "information. Consider current market trends, industry standards, and best practices "
    "for startups in this space."
)

ENHANCE_ITEMS = (
    "Refined value proposition",
    "Improved market positioning strategy",
    "Enhanced competitive analysis",
    "Optimized go-to-market strategy",
    "Risk mitigation strategies",
    "Growth and scaling recommendations",
)


def _section(title: str, fields: list[tuple[str, object]]) -> str:
    lines = [f"{title}:"]
    lines.extend(f"- {label}: {value}" for label, value in fields)
    return "\n".join(lines)


def build_analysis_prompt(bundle: ProjectBundle) -> str:
    """
    Build the user prompt describing a project for analysis.

    Only satellites that exist get a section.

    Args:
        bundle: Project and satellites (evaluation results are ignored)

    Returns:
        Prompt text
    """
    project = bundle.project
    sections = [
        "Business Analysis Request:",
        _section(
            "COMPANY OVERVIEW",
            [
                ("Business Name", project.name),
                ("Description", project.description),
                ("Industry", project.industry),
                ("Development Stage", project.stage),
                ("Target Markets", ", ".join(project.target_markets) or "Not specified"),
                ("Team Size", project.team_size),
            ],
        ),
    ]

    market = bundle.market_analysis
    if market:
        competitors = [c.model_dump() for c in market.competitors]
        sections.append(
            _section(
                "MARKET ANALYSIS",
                [
                    ("Target Customers", market.target_customers),
                    ("Market Size", market.market_size),
                    ("Growth Rate", market.growth_rate),
                    ("Competitive Advantage", market.competitive_advantage),
                    ("Competitors", json.dumps(competitors)),
                ],
            )
        )

    product = bundle.product_details
    if product:
        sections.append(
            _section(
                "PRODUCT DETAILS",
                [
                    ("Product Description", product.product_description),
                    ("Unique Value Proposition", product.unique_value),
                    ("Development Stage", product.development_stage),
                    ("Intellectual Property", product.intellectual_property),
                    ("Scalability", product.scalability),
                ],
            )
        )

    financial = bundle.financial_projections
    if financial:
        sections.append(
            _section(
                "FINANCIAL PROJECTIONS",
                [
                    ("Business Model", financial.business_model),
                    ("Revenue Streams", ", ".join(financial.revenue_streams)),
                    ("Initial Investment Required", financial.initial_investment),
                    ("Break-even Point", financial.break_even_point),
                    ("Operating Costs", json.dumps(financial.operating_costs.model_dump())),
                    ("Revenue Projections", json.dumps(financial.projected_revenue)),
                ],
            )
        )

    sections.append(ANALYSIS_CLOSING)
    return "\n\n".join(sections)


def build_enhance_plan_prompt(bundle: ProjectBundle) -> str:
    """Build the user prompt asking for an enhanced business plan section."""
    items = "\n".join(f"{i}. {item}" for i, item in enumerate(ENHANCE_ITEMS, start=1))
    return (
        "Please enhance and improve the following business plan with specific, "
        "actionable insights:\n\n"
        f"{build_analysis_prompt(bundle)}\n\n"
        "Provide an enhanced business plan section that includes:\n"
        f"{items}\n\n"
        "Format the response as a professional business plan section with clear "
        "headings and bullet points."
    )
