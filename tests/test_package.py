"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import onlycare

    assert onlycare.__version__


def test_normalization_module_imports() -> None:
    """Verify normalization module structure is correct."""
    from onlycare.normalization import (
        EntityKind,
        coerce_bool,
        map_call,
        map_coin_package,
        map_conversation,
        map_message,
        map_transaction,
        map_user,
        normalize_records,
        parse_timestamp,
        to_domain,
    )

    assert EntityKind is not None
    assert coerce_bool is not None
    assert map_call is not None
    assert map_coin_package is not None
    assert map_conversation is not None
    assert map_message is not None
    assert map_transaction is not None
    assert map_user is not None
    assert normalize_records is not None
    assert parse_timestamp is not None
    assert to_domain is not None


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from onlycare.config import AppConfig, load_config

    assert AppConfig is not None
    assert load_config is not None


def test_schemas_module_imports() -> None:
    """Verify schemas module structure is correct."""
    from onlycare.schemas import (
        CallFrameSchema,
        CoinPackageFrameSchema,
        ConversationFrameSchema,
        MessageFrameSchema,
        SchemaRegistry,
        TransactionFrameSchema,
        UserFrameSchema,
    )

    assert CallFrameSchema is not None
    assert CoinPackageFrameSchema is not None
    assert ConversationFrameSchema is not None
    assert MessageFrameSchema is not None
    assert SchemaRegistry is not None
    assert TransactionFrameSchema is not None
    assert UserFrameSchema is not None
