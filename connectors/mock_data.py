"""
Module: connectors.mock_data

Seed records for the in-memory stores and the canned dashboard content.
Stores copy these at construction time; nothing here is mutated at runtime.
"""

from typing import Any

PRODUCTS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "sku": "44577",
        "name": "Great Value Olive Oil",
        "category": "Pantry",
        "region": "Northeast",
        "price": 3.98,
        "cogs": 3.45,
        "margin": 13.3,
        "marginDelta": -2.1,
        "tariffImpact": 0.8,
        "shrinkRate": 1.2,
        "supplier": "Mediterranean Imports",
        "lastUpdated": "2024-01-15T10:30:00Z",
        "status": "active",
    },
    {
        "id": "2",
        "sku": "89234",
        "name": "Organic Milk 1/2 Gallon",
        "category": "Dairy",
        "region": "Southeast",
        "price": 4.29,
        "cogs": 4.15,
        "margin": 3.3,
        "marginDelta": -1.8,
        "tariffImpact": 0.0,
        "shrinkRate": 3.5,
        "supplier": "Local Dairy Co",
        "lastUpdated": "2024-01-15T09:15:00Z",
        "status": "active",
    },
    {
        "id": "3",
        "sku": "15678",
        "name": "Premium Coffee Beans",
        "category": "Beverages",
        "region": "West",
        "price": 12.99,
        "cogs": 8.50,
        "margin": 34.6,
        "marginDelta": 1.2,
        "tariffImpact": 2.1,
        "shrinkRate": 0.8,
        "supplier": "Global Coffee Inc",
        "lastUpdated": "2024-01-15T11:45:00Z",
        "status": "active",
    },
    {
        "id": "4",
        "sku": "33456",
        "name": "Fresh Strawberries",
        "category": "Produce",
        "region": "Southwest",
        "price": 3.99,
        "cogs": 4.25,
        "margin": -6.5,
        "marginDelta": -8.2,
        "tariffImpact": 0.0,
        "shrinkRate": 12.5,
        "supplier": "Berry Farms LLC",
        "lastUpdated": "2024-01-15T08:20:00Z",
        "status": "active",
    },
)

KPIS: tuple[dict[str, Any], ...] = (
    {
        "name": "Average Gross Margin",
        "value": 12.4,
        "unit": "%",
        "change": 0.8,
        "trend": "up",
        "status": "positive",
        "target": 15.0,
        "lastUpdated": "2024-01-15T10:30:00Z",
    },
    {
        "name": "At-Risk SKUs",
        "value": 247,
        "unit": "items",
        "change": -12,
        "trend": "down",
        "status": "positive",
        "target": 200,
        "lastUpdated": "2024-01-15T10:30:00Z",
    },
    {
        "name": "Tariff Impact",
        "value": 2.1,
        "unit": "%",
        "change": 0.3,
        "trend": "up",
        "status": "warning",
        "target": 1.5,
        "lastUpdated": "2024-01-15T10:30:00Z",
    },
    {
        "name": "Shrink Loss",
        "value": 1.8,
        "unit": "%",
        "change": -0.2,
        "trend": "down",
        "status": "positive",
        "target": 2.0,
        "lastUpdated": "2024-01-15T10:30:00Z",
    },
    {
        "name": "Total Revenue",
        "value": 1250000,
        "unit": "$",
        "change": 45000,
        "trend": "up",
        "status": "positive",
        "target": 1200000,
        "lastUpdated": "2024-01-15T10:30:00Z",
    },
    {
        "name": "Cost of Goods Sold",
        "value": 1095000,
        "unit": "$",
        "change": 38000,
        "trend": "up",
        "status": "warning",
        "target": 1050000,
        "lastUpdated": "2024-01-15T10:30:00Z",
    },
)

KPI_TRENDS: dict[str, list[dict[str, Any]]] = {
    "Average Gross Margin": [
        {"date": "2024-01-01", "value": 12.1},
        {"date": "2024-01-05", "value": 12.2},
        {"date": "2024-01-10", "value": 12.3},
        {"date": "2024-01-15", "value": 12.4},
    ],
    "At-Risk SKUs": [
        {"date": "2024-01-01", "value": 259},
        {"date": "2024-01-05", "value": 255},
        {"date": "2024-01-10", "value": 251},
        {"date": "2024-01-15", "value": 247},
    ],
    "Tariff Impact": [
        {"date": "2024-01-01", "value": 1.8},
        {"date": "2024-01-05", "value": 1.9},
        {"date": "2024-01-10", "value": 2.0},
        {"date": "2024-01-15", "value": 2.1},
    ],
}

SUGGESTIONS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "type": "price_adjustment",
        "title": "Raise price from $3.98 → $4.28",
        "description": "Increase price by 7.5% to maintain target margin for Great Value Olive Oil",
        "impact": 0.30,
        "confidence": 0.85,
        "action": "price_adjustment",
        "status": "pending",
        "productId": "1",
        "createdAt": "2024-01-15T10:30:00Z",
    },
    {
        "id": "2",
        "type": "supplier_change",
        "title": "Use domestic supplier (save $0.40/unit)",
        "description": "Switch to US-based supplier to avoid tariff impact for olive oil",
        "impact": 0.40,
        "confidence": 0.92,
        "action": "supplier_change",
        "status": "pending",
        "productId": "1",
        "createdAt": "2024-01-15T10:30:00Z",
    },
    {
        "id": "3",
        "type": "promotion_adjustment",
        "title": "Remove current promotion",
        "description": "Current promotion is hurting margin by 2.1% for dairy products",
        "impact": 0.08,
        "confidence": 0.78,
        "action": "promotion_removal",
        "status": "pending",
        "productId": "2",
        "createdAt": "2024-01-15T09:15:00Z",
    },
    {
        "id": "4",
        "type": "price_adjustment",
        "title": "Increase price by $0.50",
        "description": "Adjust price for organic milk to cover increased COGS",
        "impact": 0.50,
        "confidence": 0.88,
        "action": "price_adjustment",
        "status": "approved",
        "productId": "2",
        "createdAt": "2024-01-15T09:15:00Z",
        "approvedAt": "2024-01-15T11:00:00Z",
    },
    {
        "id": "5",
        "type": "bundle_suggestion",
        "title": "Bundle with complementary product",
        "description": "Bundle coffee beans with filters to increase overall margin",
        "impact": 0.25,
        "confidence": 0.75,
        "action": "bundle_creation",
        "status": "rejected",
        "productId": "3",
        "createdAt": "2024-01-15T11:45:00Z",
        "rejectedAt": "2024-01-15T12:30:00Z",
        "rejectionReason": "Not feasible with current inventory system",
    },
)

ALERTS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "type": "critical",
        "message": "Strawberries margin dropped to -6.5%",
        "timestamp": "2024-01-15T08:20:00Z",
        "productId": "4",
    },
    {
        "id": "2",
        "type": "warning",
        "message": "Coffee beans tariff impact increased",
        "timestamp": "2024-01-15T11:45:00Z",
        "productId": "3",
    },
    {
        "id": "3",
        "type": "info",
        "message": "Olive oil margin improved by 2.1%",
        "timestamp": "2024-01-15T10:30:00Z",
        "productId": "1",
    },
)

RECENT_ANALYSES: tuple[dict[str, Any], ...] = (
    {
        "productId": "1",
        "analysis": "Margin fell due to 12% increase in import duty from Italy",
        "timestamp": "2024-01-15T10:30:00Z",
    },
    {
        "productId": "2",
        "analysis": "Dairy margins impacted by increased wholesale milk prices",
        "timestamp": "2024-01-15T09:15:00Z",
    },
)

ANALYSIS_SUMMARY = (
    "Margin fell due to 12% increase in import duty from Italy and higher shrink "
    "in refrigerated storage at 243 locations."
)

ANALYSIS_SUGGESTIONS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "type": "price_adjustment",
        "title": "Raise price from $3.98 → $4.28",
        "description": "Increase price by 7.5% to maintain target margin",
        "impact": 0.30,
        "confidence": 0.85,
        "action": "price_adjustment",
        "status": "pending",
    },
    {
        "id": "2",
        "type": "supplier_change",
        "title": "Use domestic supplier (save $0.40/unit)",
        "description": "Switch to US-based supplier to avoid tariff impact",
        "impact": 0.40,
        "confidence": 0.92,
        "action": "supplier_change",
        "status": "pending",
    },
    {
        "id": "3",
        "type": "promotion_adjustment",
        "title": "Remove current promotion",
        "description": "Current promotion is hurting margin by 2.1%",
        "impact": 0.08,
        "confidence": 0.78,
        "action": "promotion_removal",
        "status": "pending",
    },
)

ROOT_CAUSES: tuple[dict[str, Any], ...] = (
    {
        "factor": "Import Tariffs",
        "impact": 0.8,
        "description": "12% increase in olive oil import duties from Italy",
        "trend": "increasing",
    },
    {
        "factor": "Shrink Rate",
        "impact": 1.2,
        "description": "Higher than average shrink in refrigerated storage",
        "trend": "stable",
    },
    {
        "factor": "Supplier Costs",
        "impact": 0.5,
        "description": "Supplier increased base cost by 3.2%",
        "trend": "increasing",
    },
)

MARGIN_TRENDS: dict[str, Any] = {
    "overall": {"trend": "declining", "change": -0.8, "period": "30 days"},
    "byCategory": {
        "Dairy": {"trend": "declining", "change": -2.1},
        "Produce": {"trend": "declining", "change": -1.8},
        "Beverages": {"trend": "stable", "change": 0.2},
        "Pantry": {"trend": "improving", "change": 0.5},
    },
    "byRegion": {
        "Northeast": {"trend": "declining", "change": -1.2},
        "Southeast": {"trend": "declining", "change": -0.9},
        "West": {"trend": "stable", "change": 0.1},
        "Southwest": {"trend": "improving", "change": 0.3},
    },
}

# (id, role, content, seconds before startup)
CHAT_HISTORY: tuple[tuple[str, str, str, int], ...] = (
    (
        "1",
        "assistant",
        "Hello! I'm MarginIQ, your AI assistant for margin analysis. I can help you "
        "understand margin trends, identify at-risk products, and suggest improvements. "
        "What would you like to know?",
        3600,
    ),
    ("2", "user", "Which products have negative margins?", 1800),
    (
        "3",
        "assistant",
        "Products currently with negative margins:\n\n"
        "🚨 **Critical Issues:**\n"
        "• Fresh Strawberries (-6.5% margin)\n"
        "• Organic Milk (-2.1% margin)\n"
        "• Imported Cheese (-1.8% margin)\n\n"
        "**Immediate Actions Needed:**\n"
        "1. Review pricing strategy\n"
        "2. Negotiate with suppliers\n"
        "3. Consider product discontinuation\n"
        "4. Implement shrink reduction measures",
        900,
    ),
)

SUGGESTED_QUESTIONS: tuple[str, ...] = (
    "Which top 10 items lost margin this month?",
    "What categories are most affected by tariffs?",
    "Why are beverage margins falling in Florida?",
    "Show me products with negative margins",
    "What's the impact of recent tariff changes?",
    "Which suppliers have the highest cost increases?",
    "How are dairy margins trending?",
    "What's causing shrink in produce?",
    "Which regions have the best margins?",
    "How can we improve coffee bean margins?",
)
