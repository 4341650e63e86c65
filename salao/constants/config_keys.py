"""System configuration keys."""


class ConfigKeys:
    """Keys for settings kept in the in-memory system config repository."""

    # Scheduling
    SLOT_INTERVAL_MINUTES = "slot_interval_minutes"

    # Plans
    DEFAULT_PLAN_VALIDITY_DAYS = "default_plan_validity_days"

    # Reports
    REPORT_ITEMS_PER_PAGE = "report_items_per_page"

    # Birthday campaign
    BIRTHDAY_MESSAGE = "birthday_message"
    BIRTHDAY_VOUCHER_ID = "birthday_voucher_id"


class ConfigDefaults:
    """Default values for system configuration."""

    SLOT_INTERVAL_MINUTES = "15"

    DEFAULT_PLAN_VALIDITY_DAYS = "30"

    REPORT_ITEMS_PER_PAGE = "12"

    BIRTHDAY_MESSAGE = (
        "Olá, {cliente}! A equipe da {empresa} te deseja um feliz aniversário! 🎉 "
        "Para comemorar, aqui está um presente para você:"
    )
    BIRTHDAY_VOUCHER_ID = "voucher-aniversario"
