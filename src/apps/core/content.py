"""Default landing page content, used for any section without a stored override."""

import copy

SECTIONS = ("hero", "services", "portfolio", "contact")

DEFAULT_CONTENT: dict = {
    "hero": {
        "title": "Build your",
        "subtitle": "online presence",
        "description": (
            "Design, deployment and redesign of websites for individuals and businesses. "
            "Turn your ideas into a digital reality."
        ),
        "image": "https://images.unsplash.com/photo-1488590528505-98d2b5aba04b",
        "stats": [
            {"number": "50+", "label": "Websites built"},
            {"number": "100%", "label": "Client satisfaction"},
            {"number": "24h", "label": "Support"},
        ],
    },
    "services": [
        {
            "id": "design",
            "icon": "Code2",
            "title": "Web Design",
            "description": "Custom, modern and fast websites tailored to your needs and visual identity.",
            "features": ["Responsive design", "Optimised UX/UI", "Modern technologies"],
        },
        {
            "id": "deployment",
            "icon": "Rocket",
            "title": "Deployment",
            "description": "Professional go-live with secure hosting, domain name and performance tuning.",
            "features": ["Secure hosting", "SSL configuration", "SEO optimisation"],
        },
        {
            "id": "redesign",
            "icon": "RefreshCw",
            "title": "Redesign",
            "description": "Modernise your existing site to improve performance, design and user experience.",
            "features": ["Full audit", "Design refresh", "Technical optimisation"],
        },
    ],
    "portfolio": [
        {
            "id": "ecommerce",
            "title": "E-commerce Store",
            "category": "Design",
            "description": "Complete online shop with secure payments",
            "image": "https://images.unsplash.com/photo-1591439657848-9f4b9ce436b9",
        },
        {
            "id": "portfolio-pro",
            "title": "Professional Portfolio",
            "category": "Redesign",
            "description": "Full redesign of an architect's portfolio",
            "image": "https://images.unsplash.com/photo-1544717297-fa95b6ee9643",
        },
        {
            "id": "web-app",
            "title": "Web Application",
            "category": "Deployment",
            "description": "Deployment of a business management application",
            "image": "https://images.unsplash.com/photo-1613203713329-b2e39e14c266",
        },
    ],
    "contact": {
        "email": "contact@getyoursite.com",
        "phone": "+33 (0)1 23 45 67 89",
        "location": "France",
    },
}


def default_section(section: str):
    """Return a fresh copy of the default data for ``section``."""
    return copy.deepcopy(DEFAULT_CONTENT[section])


def validate_section(section, data) -> str | None:
    """Return an error message if ``data`` cannot replace ``section``, else None."""
    if not isinstance(section, str) or section not in DEFAULT_CONTENT:
        return f"Unknown content type. Must be one of: {', '.join(SECTIONS)}"
    expected = type(DEFAULT_CONTENT[section])
    if not isinstance(data, expected):
        return f"Content for '{section}' must be a JSON {'object' if expected is dict else 'array'}"
    return None
