from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHELFGRAPH_")

    # Normalization settings
    unknown_author: str = "Unknown Author"

    # Graph builder weights
    tag_shared_weight: float = 2.0
    author_shared_strength: float = 1.5
    title_similarity_weight: float = 0.8
    title_min_token_length: int = 3  # tokens must be strictly longer than this
    resonance_probability: float = 0.15
    resonance_strength: float = 0.5
    resonance_max_incident: int = 2
    large_graph_threshold: int = 2000  # above this, compare only indexed candidates

    # Query remapper settings
    focus_boost: float = 1.0
    focus_strength: float = 2.0

    # Cluster analyzer settings
    cluster_recency_window_days: int = 90
    cluster_expanding_ratio: float = 1.3
    cluster_dormant_ratio: float = 0.7
    health_diversity_weight: float = 0.5
    health_recency_weight: float = 0.5
    cluster_related_tags: int = 2
    bridge_book_min_tags: int = 4

    # Influence and constellation settings
    influence_min_strength: float = 0.2
    influence_evidence_limit: int = 3
    constellation_min_books: int = 3
    constellation_limit: int = 8
    constellation_satellites: int = 5

    # Bridge detector settings
    bridge_limit: int = 6
    bridge_year_window: int = 5
    bridge_narrative_bonus: float = 0.25

    # Pattern metrics settings
    classic_era_end: int = 1970
    modern_era_end: int = 2000
    era_majority: float = 0.5
    velocity_trend_ratio: float = 1.2
    min_months_span: float = 0.1

    # Connection explainer settings
    explain_list_limit: int = 4

    # Web server settings
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
