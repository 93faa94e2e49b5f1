from tcxkit.appconfig import DEFAULT_CONFIG, save_config


def run():
    print("Welcome to tcxkit configuration!")
    config = {}

    # Home timezone
    print("\n--- Timezone Configuration ---")
    print("Common timezones: US/Eastern, US/Central, US/Mountain, US/Pacific, Europe/London")
    timezone = input(f"Home timezone (default: {DEFAULT_CONFIG['home_timezone']}): ").strip()
    config["home_timezone"] = timezone or DEFAULT_CONFIG["home_timezone"]

    # Debug mode
    debug_input = input("\nEnable debug mode? (y/N): ").strip().lower()
    config["debug"] = debug_input == "y"

    # Parsing
    print("\n--- Parsing Configuration ---")
    threshold = input(
        f"Moving speed threshold in m/s (default: {DEFAULT_CONFIG['moving_speed_threshold']}): "
    ).strip()
    config["moving_speed_threshold"] = float(threshold) if threshold else DEFAULT_CONFIG["moving_speed_threshold"]

    strict_input = input("Fail on laps without an average speed extension? (Y/n): ").strip().lower()
    config["strict_avg_speed"] = strict_input != "n"

    timeout = input(f"HTTP timeout in seconds (default: {DEFAULT_CONFIG['http_timeout']}): ").strip()
    config["http_timeout"] = float(timeout) if timeout else DEFAULT_CONFIG["http_timeout"]

    config_path = save_config(config)
    print(f"\nConfiguration saved to {config_path}")
