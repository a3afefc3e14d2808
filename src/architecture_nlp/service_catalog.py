"""AWS service catalog used for entity extraction.

The catalog is static configuration data: it is loaded once into frozen
entries and never mutated, so a single instance can be shared between
concurrent callers.
"""

from functools import lru_cache
from typing import Iterator, Optional

from .schema import ServiceEntry


# category -> [(name, description, keywords)]
SERVICE_TABLE: dict[str, list[tuple[str, str, tuple[str, ...]]]] = {
    'compute': [
        ('EC2', 'Virtual servers with various instance types', ('ec2', 'virtual machine', 'vm', 'instance')),
        ('Lambda', 'Serverless compute service', ('lambda', 'serverless', 'function')),
        ('ECS', 'Container orchestration service', ('ecs', 'container', 'docker')),
        ('EKS', 'Kubernetes service', ('eks', 'kubernetes', 'k8s')),
        ('Fargate', 'Serverless containers', ('fargate', 'serverless container')),
        ('Batch', 'Batch processing', ('batch', 'batch processing')),
        ('Elastic Beanstalk', 'Platform as a Service', ('beanstalk', 'paas')),
    ],
    'storage': [
        ('S3', 'Object storage with multiple tiers', ('s3', 'object storage', 'bucket')),
        ('EBS', 'Block storage for EC2', ('ebs', 'block storage', 'volume')),
        ('EFS', 'Managed NFS file system', ('efs', 'nfs', 'file system')),
        ('Glacier', 'Long-term archival storage', ('glacier', 'archive', 'archival')),
        ('Storage Gateway', 'Hybrid cloud storage', ('storage gateway', 'hybrid storage')),
        ('FSx', 'Managed file systems', ('fsx', 'managed file system')),
    ],
    'database': [
        ('RDS', 'Managed relational databases', ('rds', 'relational database', 'postgresql', 'mysql')),
        ('DynamoDB', 'NoSQL database service', ('dynamodb', 'nosql', 'document database')),
        ('Aurora', 'High-performance relational database', ('aurora', 'high performance db')),
        ('Redshift', 'Data warehousing', ('redshift', 'data warehouse', 'analytics')),
        ('ElastiCache', 'In-memory caching', ('elasticache', 'cache', 'redis', 'memcached')),
        ('Neptune', 'Graph database', ('neptune', 'graph database')),
        ('DocumentDB', 'MongoDB-compatible database', ('documentdb', 'mongodb')),
    ],
    'networking': [
        ('VPC', 'Virtual private cloud networking', ('vpc', 'virtual network')),
        ('CloudFront', 'Content delivery network', ('cloudfront', 'cdn')),
        ('API Gateway', 'REST/WebSocket API management', ('api gateway', 'rest api', 'websocket')),
        ('Route 53', 'DNS and domain management', ('route53', 'dns', 'domain')),
        ('Direct Connect', 'Dedicated network connections', ('direct connect', 'dedicated connection')),
        ('Global Accelerator', 'Network performance optimization', ('global accelerator', 'network optimization')),
    ],
    'security': [
        ('IAM', 'Identity and access management', ('iam', 'identity', 'access control')),
        ('KMS', 'Key management service', ('kms', 'encryption', 'key management')),
        ('GuardDuty', 'Threat detection', ('guardduty', 'threat detection')),
        ('Shield', 'DDoS protection', ('shield', 'ddos protection')),
        ('WAF', 'Web application firewall', ('waf', 'web firewall')),
        ('Config', 'Resource inventory and compliance', ('config', 'compliance')),
    ],
    'management': [
        ('CloudWatch', 'Monitoring and observability', ('cloudwatch', 'monitoring', 'logs')),
        ('CloudTrail', 'API activity logging', ('cloudtrail', 'api logging')),
        ('Systems Manager', 'Operational insights', ('systems manager', 'ssm')),
        ('CloudFormation', 'Infrastructure as code', ('cloudformation', 'iac', 'infrastructure as code')),
        ('CDK', 'Cloud Development Kit', ('cdk', 'development kit')),
        ('Service Catalog', 'Approved IT services portfolio', ('service catalog', 'it services')),
    ],
    'ai': [
        ('SageMaker', 'Machine learning platform', ('sagemaker', 'machine learning', 'ml')),
        ('Rekognition', 'Image/video analysis', ('rekognition', 'image analysis', 'video analysis')),
        ('Lex', 'Conversational interfaces', ('lex', 'chatbot', 'conversational')),
        ('Polly', 'Text-to-speech', ('polly', 'text to speech', 'tts')),
        ('Translate', 'Language translation', ('translate', 'translation')),
        ('Comprehend', 'Natural language processing', ('comprehend', 'nlp')),
    ],
    'serverless': [
        ('Lambda', 'Event-driven compute', ('lambda', 'serverless function')),
        ('Step Functions', 'Workflow orchestration', ('step functions', 'workflow')),
        ('EventBridge', 'Event bus service', ('eventbridge', 'event bus')),
        ('SQS', 'Message queuing', ('sqs', 'queue', 'message queue')),
        ('SNS', 'Pub/Sub messaging', ('sns', 'pub/sub', 'notification')),
        ('DynamoDB Streams', 'Database change streams', ('dynamodb streams', 'change stream')),
    ],
}


class ServiceCatalog:
    """Immutable lookup table of known AWS services grouped by category."""

    def __init__(self, table: Optional[dict[str, list[tuple[str, str, tuple[str, ...]]]]] = None):
        table = table if table is not None else SERVICE_TABLE
        self._categories: dict[str, tuple[ServiceEntry, ...]] = {
            category: tuple(
                ServiceEntry(
                    name=name,
                    category=category,
                    description=description,
                    keywords=tuple(keywords),
                )
                for name, description, keywords in services
            )
            for category, services in table.items()
        }

    def categories(self) -> list[str]:
        """Category names in catalog order."""
        return list(self._categories)

    def all_services(self) -> Iterator[ServiceEntry]:
        """Iterate every entry in catalog order (duplicates across categories included)."""
        for services in self._categories.values():
            yield from services

    def get_catalog(self) -> dict[str, dict[str, list[ServiceEntry]]]:
        """Return the catalog as ``{category: {"services": [...]}}``.

        A new mapping is built on every call; the entries themselves are frozen.
        """
        return {
            category: {"services": list(services)}
            for category, services in self._categories.items()
        }

    def find_service(self, query: str) -> Optional[ServiceEntry]:
        """Find a service whose name or one of whose keywords equals ``query``.

        Matching is case-insensitive and exact; the first hit in catalog order wins.
        """
        query = query.lower()
        for service in self.all_services():
            if service.name.lower() == query or any(kw.lower() == query for kw in service.keywords):
                return service
        return None

    def get_services_by_category(self, category: str) -> list[ServiceEntry]:
        """All services in a category, or an empty list for unknown categories."""
        return list(self._categories.get(category, ()))


@lru_cache(maxsize=None)
def default_service_catalog() -> ServiceCatalog:
    """Shared catalog instance built from the bundled table."""
    return ServiceCatalog()
