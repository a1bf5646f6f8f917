from cDash.runtime_client.runtime_cli_client import RuntimeCliClient
