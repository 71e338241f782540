"""API router for the evaluation endpoints."""

from fastapi import APIRouter

from app.api import (
    ai,
    documents,
    evaluation_results,
    financial_projections,
    market_analysis,
    product_details,
    projects,
    wizard,
)

router = APIRouter()

# Step 1: business basics
router.include_router(projects.router, prefix="/projects", tags=["projects"])

# Steps 2-4: satellite records
router.include_router(market_analysis.router, prefix="/market-analysis", tags=["market_analysis"])
router.include_router(product_details.router, prefix="/product-details", tags=["product_details"])
router.include_router(
    financial_projections.router, prefix="/financial-projections", tags=["financial_projections"]
)

# Final step: scoring
router.include_router(
    evaluation_results.router, prefix="/evaluation-results", tags=["evaluation_results"]
)

# Wizard progress
router.include_router(wizard.router, prefix="/wizard", tags=["wizard"])

# Generated documents
router.include_router(documents.router, prefix="/generate", tags=["documents"])

# AI recommendations
router.include_router(ai.router, prefix="/ai", tags=["ai"])
