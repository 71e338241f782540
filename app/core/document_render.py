"""Render project bundles into a business plan PDF and an HTML pitch deck."""

import html
import io
from datetime import date

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.core.logging import get_logger
from app.core.projections import PROJECTION_YEARS, format_currency, year_labels
from app.core.schemas_projects import ProjectBundle

logger = get_logger(__name__)

NOT_SPECIFIED = "Not specified"

TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#e0e0e0")),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#666666")),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]
)


def _esc(value: object) -> str:
    return html.escape(str(value), quote=False)


def _styles() -> dict[str, ParagraphStyle]:
    sample = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "PlanTitle", parent=sample["Title"], fontSize=24, alignment=TA_CENTER, spaceAfter=20
        ),
        "subtitle": ParagraphStyle(
            "PlanSubtitle", parent=sample["Heading1"], fontSize=18, alignment=TA_CENTER, spaceAfter=20
        ),
        "centered": ParagraphStyle("PlanCentered", parent=sample["Normal"], alignment=TA_CENTER),
        "heading": ParagraphStyle("PlanHeading", parent=sample["Heading1"], fontSize=16, spaceAfter=10),
        "subheading": ParagraphStyle("PlanSubheading", parent=sample["Heading2"], fontSize=14),
        "label": ParagraphStyle(
            "PlanLabel", parent=sample["Normal"], fontName="Helvetica-Bold", spaceBefore=8
        ),
        "body": ParagraphStyle("PlanBody", parent=sample["Normal"], fontSize=11, leading=14),
        "cell": ParagraphStyle("PlanCell", parent=sample["Normal"], fontSize=9, leading=11),
    }


def _field(story: list, styles: dict[str, ParagraphStyle], label: str, value: object) -> None:
    story.append(Paragraph(_esc(label), styles["label"]))
    story.append(Paragraph(_esc(value), styles["body"]))


def business_plan_story(bundle: ProjectBundle, prepared_on: date | None = None) -> list:
    """
    Build the reportlab flowables for a business plan.

    Sections appear in a fixed order; a missing satellite renders a
    "not provided" line instead of its section body.

    Args:
        bundle: Project and satellites
        prepared_on: Date printed on the title page (defaults to today)

    Returns:
        List of flowables ready for ``SimpleDocTemplate.build``
    """
    styles = _styles()
    prepared = prepared_on or date.today()
    project = bundle.project
    market = bundle.market_analysis
    product = bundle.product_details
    financial = bundle.financial_projections
    evaluation = bundle.evaluation_results

    story: list = [
        Spacer(1, 120),
        Paragraph("BUSINESS PLAN", styles["title"]),
        Paragraph(_esc(project.name), styles["subtitle"]),
        Paragraph(f"Prepared: {prepared.month}/{prepared.day}/{prepared.year}", styles["centered"]),
        PageBreak(),
    ]

    # Executive summary
    story.append(Paragraph("Executive Summary", styles["heading"]))
    _field(story, styles, "Business Overview:", project.description)
    story.append(Paragraph(f"Industry: {_esc(project.industry)}", styles["body"]))
    story.append(Paragraph(f"Current Stage: {_esc(project.stage)}", styles["body"]))
    story.append(
        Paragraph(f"Target Markets: {_esc(', '.join(project.target_markets))}", styles["body"])
    )
    story.append(Paragraph(f"Team Size: {_esc(project.team_size)}", styles["body"]))
    if evaluation:
        story.append(
            Paragraph(f"Business Viability Score: {evaluation.overall_score}%", styles["body"])
        )
    story.append(PageBreak())

    # Market analysis
    story.append(Paragraph("Market Analysis", styles["heading"]))
    if market:
        _field(story, styles, "Target Customers:", market.target_customers)
        _field(story, styles, "Market Size:", market.market_size)
        _field(story, styles, "Market Growth Rate:", market.growth_rate)
        _field(story, styles, "Competitive Advantage:", market.competitive_advantage)

        if market.competitors:
            story.append(PageBreak())
            story.append(Paragraph("Competitive Analysis", styles["subheading"]))
            rows = [["Competitor", "Strengths", "Weaknesses"]]
            rows.extend(
                [
                    Paragraph(_esc(c.name), styles["cell"]),
                    Paragraph(_esc(c.strengths), styles["cell"]),
                    Paragraph(_esc(c.weaknesses), styles["cell"]),
                ]
                for c in market.competitors
            )
            table = Table(rows, colWidths=[120, 180, 180], repeatRows=1)
            table.setStyle(TABLE_STYLE)
            story.append(table)
    else:
        story.append(Paragraph("Market analysis data not provided.", styles["body"]))
    story.append(PageBreak())

    # Product
    story.append(Paragraph("Product/Service Details", styles["heading"]))
    if product:
        _field(story, styles, "Product Description:", product.product_description)
        _field(story, styles, "Unique Value Proposition:", product.unique_value)
        _field(story, styles, "Development Stage:", product.development_stage)
        _field(story, styles, "Intellectual Property:", product.intellectual_property)
        _field(story, styles, "Scalability:", product.scalability)
    else:
        story.append(Paragraph("Product details not provided.", styles["body"]))
    story.append(PageBreak())

    # Financials
    story.append(Paragraph("Financial Projections", styles["heading"]))
    if financial:
        _field(story, styles, "Business Model:", financial.business_model)
        _field(story, styles, "Revenue Streams:", ", ".join(financial.revenue_streams))
        _field(story, styles, "Initial Investment Required:", financial.initial_investment)
        _field(story, styles, "Break-even Point:", financial.break_even_point)

        if financial.projected_revenue:
            story.append(PageBreak())
            story.append(Paragraph("5-Year Revenue Projections", styles["subheading"]))
            labels = year_labels(PROJECTION_YEARS, start_year=prepared.year)
            revenue = list(financial.projected_revenue) + [0] * PROJECTION_YEARS
            table = Table(
                [labels, [format_currency(amount) for amount in revenue[:PROJECTION_YEARS]]]
            )
            table.setStyle(TABLE_STYLE)
            story.append(table)
    else:
        story.append(Paragraph("Financial projections not provided.", styles["body"]))

    # Recommendations
    if evaluation and evaluation.recommendations:
        story.append(PageBreak())
        story.append(Paragraph("Recommendations", styles["heading"]))
        for index, recommendation in enumerate(evaluation.recommendations, start=1):
            story.append(Paragraph(f"{index}. {_esc(recommendation)}", styles["body"]))
            story.append(Spacer(1, 6))

    return story


def render_business_plan_pdf(bundle: ProjectBundle, prepared_on: date | None = None) -> bytes:
    """
    Render a business plan PDF.

    Args:
        bundle: Project and satellites
        prepared_on: Date printed on the title page (defaults to today)

    Returns:
        PDF document bytes
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=f"Business Plan - {bundle.project.name}",
        leftMargin=40,
        rightMargin=40,
    )
    doc.build(business_plan_story(bundle, prepared_on))

    pdf = buffer.getvalue()
    logger.info(
        f"Rendered business plan for project {bundle.project.id} ({len(pdf)} bytes)",
        extra={"project_id": bundle.project.id},
    )
    return pdf


def _slide(kind: str, title: str, body: str, heading: str = "h2") -> str:
    return (
        f'  <section class="slide {kind}-slide">\n'
        f'    <div class="slide-content">\n'
        f"      <{heading}>{title}</{heading}>\n"
        f"{body}"
        f"    </div>\n"
        f"  </section>\n"
    )


def _problem_statement(description: str) -> str:
    return description.split(".")[0] + "."


def render_pitch_deck_html(bundle: ProjectBundle) -> str:
    """
    Render a ten-slide pitch deck as an HTML fragment.

    Missing satellite values fall back to fixed placeholder copy. All user
    text is HTML-escaped.
    """
    project = bundle.project
    market = bundle.market_analysis
    product = bundle.product_details
    financial = bundle.financial_projections

    def pick(value: str | None, fallback: str = NOT_SPECIFIED) -> str:
        return _esc(value) if value else _esc(fallback)

    revenue_streams = ", ".join(financial.revenue_streams) if financial else None

    slides = [
        _slide(
            "cover",
            _esc(project.name),
            f'      <p class="tagline">{pick(product.unique_value if product else None, "Innovative Solution")}</p>\n',
            heading="h1",
        ),
        _slide(
            "problem",
            "The Problem",
            f'      <div class="problem-description">{_esc(_problem_statement(project.description))}</div>\n',
        ),
        _slide(
            "solution",
            "Our Solution",
            f'      <div class="solution-description">'
            f"{pick(product.product_description if product else None, project.description)}</div>\n",
        ),
        _slide(
            "market",
            "Market Opportunity",
            '      <div class="market-details">\n'
            f"        <p><strong>Target Market:</strong> {pick(market.target_customers if market else None)}</p>\n"
            f"        <p><strong>Market Size:</strong> {pick(market.market_size if market else None)}</p>\n"
            f"        <p><strong>Growth Rate:</strong> {pick(market.growth_rate if market else None)}</p>\n"
            "      </div>\n",
        ),
        _slide(
            "business-model",
            "Business Model",
            '      <div class="business-model-details">\n'
            f"        <p><strong>Model:</strong> {pick(financial.business_model if financial else None)}</p>\n"
            f"        <p><strong>Revenue Streams:</strong> {pick(revenue_streams)}</p>\n"
            "      </div>\n",
        ),
        _slide(
            "competitive",
            "Competitive Advantage",
            '      <div class="competitive-details">\n'
            f"        <p>{pick(market.competitive_advantage if market else None, 'Our unique approach provides significant advantages over competitors.')}</p>\n"
            "      </div>\n",
        ),
        _slide(
            "financials",
            "Financial Projections",
            '      <div class="financial-chart">\n'
            '        <div id="revenue-chart" class="chart-placeholder">Revenue chart will be rendered here</div>\n'
            "      </div>\n"
            '      <div class="financial-highlights">\n'
            f"        <p><strong>Initial Investment:</strong> {pick(financial.initial_investment if financial else None)}</p>\n"
            f"        <p><strong>Break-even:</strong> {pick(financial.break_even_point if financial else None)}</p>\n"
            "      </div>\n",
        ),
        _slide(
            "team",
            "Our Team",
            '      <div class="team-details">\n'
            f"        <p><strong>Team Size:</strong> {_esc(project.team_size)}</p>\n"
            f"        <p>Our talented team brings together expertise in {_esc(project.industry)} "
            "and a passion for innovation.</p>\n"
            "      </div>\n",
        ),
        _slide(
            "ask",
            "Investment Opportunity",
            '      <div class="ask-details">\n'
            f"        <p><strong>Seeking:</strong> {pick(financial.initial_investment if financial else None, 'Investment amount not specified')}</p>\n"
            "        <p><strong>Use of Funds:</strong> Product development, market expansion, "
            "and operational growth</p>\n"
            "      </div>\n",
        ),
        _slide(
            "contact",
            "Thank You",
            '      <p class="contact-info">Contact us to learn more about this opportunity</p>\n',
        ),
    ]

    return '<div class="pitch-deck">\n' + "".join(slides) + "</div>\n"
