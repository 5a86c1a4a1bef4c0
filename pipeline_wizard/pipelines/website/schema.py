"""Website configuration schema, generation 2.

Flat apart from the shared corporate identity block. Field groups follow
the wizard steps.
"""

from typing import List, Optional

from pydantic import Field

from ...engine.model import ConfigModel
from ..shared.ci import CIConfig


class WebsiteConfig(ConfigModel):
    # 1: import
    imported_project_id: Optional[str] = None
    import_mode: str = 'new'

    # 2: type & purpose
    website_types: List[str] = Field(default_factory=list)
    industry: str = ''
    target_audience: str = ''
    elevator_pitch: str = ''
    site_name: str = ''

    # 3: branding
    primary_color: str = '#2563eb'
    secondary_color: str = '#64748b'
    font_heading: str = 'inter'
    font_body: str = 'inter'
    logo_style: str = ''
    brand_tone: str = ''
    custom_domain: str = ''

    # 4: corporate identity
    corporate_identity: CIConfig = Field(default_factory=CIConfig)

    # 5: layout
    layout_style: str = ''
    navigation_style: str = ''
    header_style: str = ''
    footer_style: str = ''
    page_structure: List[str] = Field(default_factory=list)

    # 6: visual design
    theme: str = 'system'
    design_system: str = ''
    animation_level: str = 'subtle'
    icon_style: str = ''
    image_strategy: str = ''
    border_radius: str = 'md'

    # 7: content
    content_types: List[str] = Field(default_factory=list)
    cms_provider: str = ''
    blog_enabled: bool = False
    i18n_enabled: bool = False
    i18n_languages: List[str] = Field(default_factory=lambda: ['en'])
    search_enabled: bool = False
    search_provider: str = ''

    # 8: framework
    framework: str = 'nextjs'
    language: str = 'typescript'
    styling: str = 'tailwind'
    component_library: str = 'shadcn'
    package_manager: str = 'pnpm'
    monorepo: bool = False

    # 9: backend
    database: str = ''
    orm: str = ''
    auth: str = ''
    auth_methods: List[str] = Field(default_factory=list)
    storage_provider: str = ''
    api_style: str = ''

    # 10: integrations
    email_provider: str = ''
    analytics: List[str] = Field(default_factory=list)
    monitoring: str = ''
    crm: str = ''
    marketing: List[str] = Field(default_factory=list)
    chat_widget: str = ''

    # 11: products (commerce)
    product_type: str = ''
    catalog_size: str = ''
    categories: bool = False
    variants: bool = False
    inventory: bool = False
    reviews: bool = False
    wishlist: bool = False
    compare_products: bool = False

    # 12: payments (commerce)
    payment_processor: str = ''
    checkout_style: str = ''
    currencies: List[str] = Field(default_factory=list)
    tax_calculation: str = ''
    invoicing: bool = False
    subscription_billing: bool = False
    coupons: bool = False
    gift_cards: bool = False

    # 13: shipping (commerce)
    shipping_providers: List[str] = Field(default_factory=list)
    fulfillment: str = ''
    international_shipping: bool = False
    shipping_zones: bool = False
    tracking_enabled: bool = False
    returns_policy: bool = False

    # 14: SEO
    seo_strategy: str = ''
    structured_data: List[str] = Field(default_factory=list)
    sitemap: bool = True
    robots_txt: bool = True
    open_graph: bool = True
    twitter_cards: bool = False
    canonical_urls: bool = True
    performance_budget: str = ''

    # 15: security
    ssl: bool = True
    csp: bool = False
    rate_limiting: bool = False
    ddos_protection: bool = False
    waf: bool = False
    backups: str = ''
    compliance: List[str] = Field(default_factory=list)
    cdn: str = ''
    caching: str = ''

    # 16: hosting
    hosting: str = ''
    ci: str = ''
    environments: List[str] = Field(default_factory=lambda: ['development', 'production'])
    containerized: bool = False
    region: str = ''
    scaling: str = ''
    domain_provider: str = ''
    distribution_channels: List[str] = Field(default_factory=list)

    # 17: AI & notes
    ai_features: List[str] = Field(default_factory=list)
    ai_provider: str = ''
    detailed_description: str = ''
    target_pages: str = ''
    reference_websites: str = ''
    constraints: str = ''
    additional_notes: str = ''

    # 18: business modules (business service)
    business_modules: List[str] = Field(default_factory=list)
    admin_features: List[str] = Field(default_factory=list)
    form_builder_features: List[str] = Field(default_factory=list)
    signature_layouts: List[str] = Field(default_factory=list)
    signature_features: List[str] = Field(default_factory=list)
    expense_features: List[str] = Field(default_factory=list)
    budget_features: List[str] = Field(default_factory=list)
    sick_leave_features: List[str] = Field(default_factory=list)

    # 19: directory & messaging (business service)
    directory_provider: str = ''
    directory_sync_fields: List[str] = Field(default_factory=list)
    directory_auto_sync: bool = False
    communication_channels: List[str] = Field(default_factory=list)
    default_notify_channel: str = ''
