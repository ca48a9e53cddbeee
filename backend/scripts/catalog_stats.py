"""Print catalog breakdown per site type."""
import structlog

from vendscore.config import settings
from vendscore.logging_config import configure_logging
from vendscore.models.enums import SiteType
from vendscore.services.metric_registry import MetricRegistry


def check():
    configure_logging(settings.log_level, settings.log_json)
    structlog.get_logger(__name__).info("catalog.stats", app_env=settings.app_env)
    registry = MetricRegistry.with_defaults()

    print(f"Catalog: {len(registry)} definitions, {len(registry.general_metrics())} general")

    for site_type in SiteType:
        applicable = registry.metrics_for(site_type)
        required = registry.required_metrics_for(site_type)
        print(f"\n{site_type.display_name}:")
        print(f"  applicable={len(applicable)} required={len(required)} "
              f"total_weight={registry.total_weight(site_type):.2f}")
        for category in registry.categories_for(site_type):
            keys = [d.key for d in registry.metrics_for(site_type, category)]
            print(f"  {category.display_name}: {', '.join(keys)}")

    problems = settings.validate_thresholds()
    if problems:
        print("\nConfiguration warnings:")
        for problem in problems:
            print(f"  {problem}")


if __name__ == "__main__":
    check()
