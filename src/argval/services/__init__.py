"""Service layer: runs check chains and reports them as CheckResult."""
