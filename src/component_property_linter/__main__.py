"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from component_property_linter.infrastructure.di.container import PropertyLinterContainer
from component_property_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = PropertyLinterContainer.get_instance()

    deps = CLIDependencies(
        config_file_loader=container.get_config_file_loader(),
        telemetry=container.get_telemetry_port(),
        registry=container.get_property_registry(),
        reporters=container.get_reporters(),
        context_factory=container.create_run_context,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
