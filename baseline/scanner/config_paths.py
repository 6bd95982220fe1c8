SSH_CONFIG      = "/etc/ssh/sshd_config"
SSH_DIR         = "/etc/ssh"
LOGIN_DEFS      = "/etc/login.defs"

# Roots walked for world-writable entries when none are given.
DEFAULT_ROOTS = ("/etc", "/var/log", "/home")
