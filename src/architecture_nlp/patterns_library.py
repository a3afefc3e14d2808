"""Library of common AWS architectural patterns."""

from functools import lru_cache
from typing import Any, Iterator, Optional

from .schema import PatternEntry


# category key -> (display name, [(name, description, services, use cases)])
PATTERN_TABLE: dict[str, tuple[str, list[tuple[str, str, tuple[str, ...], tuple[str, ...]]]]] = {
    'serverless': ('Serverless Patterns', [
        (
            'Event-driven processing',
            'Lambda + SQS/SNS + DynamoDB for event-driven workflows',
            ('Lambda', 'SQS', 'SNS', 'DynamoDB'),
            ('asynchronous processing', 'decoupled services', 'event-based workflows'),
        ),
        (
            'API backend',
            'API Gateway + Lambda + DynamoDB for serverless APIs',
            ('API Gateway', 'Lambda', 'DynamoDB'),
            ('REST APIs', 'microservices', 'serverless backends'),
        ),
        (
            'Data processing pipeline',
            'S3 → Lambda → S3/Redshift for data transformation',
            ('S3', 'Lambda', 'Redshift'),
            ('data transformation', 'ETL pipelines', 'batch processing'),
        ),
        (
            'Real-time file processing',
            'S3 → Lambda → processing → S3 for file processing',
            ('S3', 'Lambda'),
            ('file processing', 'image processing', 'document processing'),
        ),
    ]),
    'microservices': ('Microservices Patterns', [
        (
            'Service per function',
            'Individual Lambda functions per service',
            ('Lambda', 'API Gateway'),
            ('microservices', 'service isolation', 'scalable services'),
        ),
        (
            'Containerized microservices',
            'ECS/EKS with service mesh',
            ('ECS', 'EKS', 'Service Mesh'),
            ('containerized applications', 'Kubernetes', 'service mesh'),
        ),
        (
            'API composition',
            'API Gateway aggregating multiple services',
            ('API Gateway', 'Lambda', 'ECS'),
            ('API aggregation', 'service composition', 'backend for frontend'),
        ),
        (
            'Event sourcing',
            'Kinesis/DynamoDB Streams + Lambda',
            ('Kinesis', 'DynamoDB Streams', 'Lambda'),
            ('event sourcing', 'CQRS', 'audit logging'),
        ),
    ]),
    'webApplications': ('Web Application Patterns', [
        (
            'Static website',
            'S3 + CloudFront + Route 53',
            ('S3', 'CloudFront', 'Route 53'),
            ('static websites', 'SPA hosting', 'content delivery'),
        ),
        (
            'Dynamic web app',
            'ALB + EC2/ECS + RDS',
            ('ALB', 'EC2', 'ECS', 'RDS'),
            ('dynamic websites', 'traditional web apps', 'database-backed apps'),
        ),
        (
            'Serverless web app',
            'CloudFront + Lambda@Edge + S3',
            ('CloudFront', 'Lambda@Edge', 'S3'),
            ('serverless websites', 'edge computing', 'global applications'),
        ),
        (
            'Progressive web app',
            'Amplify + AppSync + Cognito',
            ('Amplify', 'AppSync', 'Cognito'),
            ('PWA', 'mobile web apps', 'offline-first apps'),
        ),
    ]),
    'dataProcessing': ('Data Processing Patterns', [
        (
            'Batch processing',
            'S3 → Glue → Athena/Redshift',
            ('S3', 'Glue', 'Athena', 'Redshift'),
            ('batch ETL', 'data warehousing', 'analytics'),
        ),
        (
            'Stream processing',
            'Kinesis → Lambda/Firehose → S3/Redshift',
            ('Kinesis', 'Lambda', 'Firehose', 'S3', 'Redshift'),
            ('real-time analytics', 'stream processing', 'log processing'),
        ),
        (
            'ETL pipeline',
            'Glue → S3 → Redshift',
            ('Glue', 'S3', 'Redshift'),
            ('data transformation', 'data loading', 'data pipelines'),
        ),
        (
            'Data lake',
            'S3 + Glue + Athena + QuickSight',
            ('S3', 'Glue', 'Athena', 'QuickSight'),
            ('data lakes', 'big data', 'analytics platforms'),
        ),
    ]),
    'hybrid': ('Hybrid & Multi-Cloud Patterns', [
        (
            'Hybrid cloud',
            'Direct Connect/VPN + Storage Gateway',
            ('Direct Connect', 'Storage Gateway'),
            ('hybrid architectures', 'on-prem integration', 'migration'),
        ),
        (
            'Multi-region deployment',
            'Route 53 + Global Accelerator',
            ('Route 53', 'Global Accelerator'),
            ('global applications', 'disaster recovery', 'low latency'),
        ),
        (
            'Disaster recovery',
            'Cross-region replication + backup',
            ('S3 Cross-Region Replication', 'Backup'),
            ('DR planning', 'business continuity', 'high availability'),
        ),
        (
            'Edge computing',
            'CloudFront + Lambda@Edge',
            ('CloudFront', 'Lambda@Edge'),
            ('edge computing', 'CDN processing', 'global applications'),
        ),
    ]),
    'security': ('Security Patterns', [
        (
            'Zero trust architecture',
            'IAM + Cognito + WAF',
            ('IAM', 'Cognito', 'WAF'),
            ('security', 'identity management', 'access control'),
        ),
        (
            'Encryption at rest/transit',
            'KMS + TLS',
            ('KMS', 'TLS'),
            ('data protection', 'compliance', 'security'),
        ),
        (
            'Network isolation',
            'VPC + security groups + NACLs',
            ('VPC', 'Security Groups', 'NACLs'),
            ('network security', 'isolation', 'compliance'),
        ),
        (
            'Compliance monitoring',
            'Config + GuardDuty + Macie',
            ('Config', 'GuardDuty', 'Macie'),
            ('compliance', 'security monitoring', 'auditing'),
        ),
    ]),
}


class PatternLibrary:
    """Immutable lookup table of architectural patterns grouped by category."""

    def __init__(self, table: Optional[dict] = None):
        table = table if table is not None else PATTERN_TABLE
        self._display_names: dict[str, str] = {}
        self._categories: dict[str, tuple[PatternEntry, ...]] = {}
        for key, (display_name, patterns) in table.items():
            self._display_names[key] = display_name
            self._categories[key] = tuple(
                PatternEntry(
                    name=name,
                    category=display_name,
                    description=description,
                    services=services,
                    use_cases=use_cases,
                )
                for name, description, services, use_cases in patterns
            )

    def categories(self) -> list[str]:
        """Category keys in library order."""
        return list(self._categories)

    def all_patterns(self) -> Iterator[PatternEntry]:
        """Iterate every pattern in library order."""
        for patterns in self._categories.values():
            yield from patterns

    def get_patterns(self) -> dict[str, dict[str, Any]]:
        """Return the library as ``{category: {"name": ..., "patterns": [...]}}``."""
        return {
            key: {"name": self._display_names[key], "patterns": list(patterns)}
            for key, patterns in self._categories.items()
        }

    def find_patterns_by_use_case(self, use_case: str) -> list[dict[str, Any]]:
        """Patterns with a use-case tag containing ``use_case`` (case-insensitive)."""
        use_case = use_case.lower()
        results = []
        for pattern in self.all_patterns():
            if any(use_case in uc.lower() for uc in pattern.use_cases):
                results.append({
                    "category": pattern.category,
                    "pattern": pattern.name,
                    "description": pattern.description,
                    "services": list(pattern.services),
                })
        return results

    def get_patterns_by_category(self, category: str) -> list[PatternEntry]:
        """All patterns in a category key, or an empty list for unknown keys."""
        return list(self._categories.get(category, ()))


@lru_cache(maxsize=None)
def default_pattern_library() -> PatternLibrary:
    """Shared library instance built from the bundled table."""
    return PatternLibrary()
