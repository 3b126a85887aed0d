import pulumi
from awsxclassic.config import Config, load_config
from awsxclassic.program import StackBuilder


def main():
    # Load YAML configuration
    config = Config.from_dict(load_config("config.yaml"))

    builder = StackBuilder(config)
    try:
        builder.build()
    except Exception as e:
        pulumi.log.error(f"Failed during resource build: {e}")
        raise

    # Export created resources
    for name, resource in builder.resources.items():
        pulumi.export(name, resource.id)


if __name__ == "__main__":
    main()
