"""Bootcamp content served by the JSON endpoints.

Constants only: nothing here changes while the process is running.
"""

from typing import Tuple

from .models import BootcampStats, CurriculumEntry, ToolEntry

STATS = BootcampStats(
    students=500,
    jobPlacement=95,
    weeks=12,
    graduates=500,
    partnerCompanies=50,
    averageRating=4.9,
    averageSalary=95000,
)

CURRICULUM: Tuple[CurriculumEntry, ...] = (
    CurriculumEntry(
        week="1-2",
        title="Foundation",
        description="Linux fundamentals, Git version control, and basic networking concepts",
        topics=("Linux Basics", "Git & GitHub", "Networking Fundamentals", "Command Line"),
    ),
    CurriculumEntry(
        week="3-4",
        title="Containerization",
        description="Docker fundamentals, container orchestration basics, and best practices",
        topics=("Docker Basics", "Docker Compose", "Container Best Practices", "Registry Management"),
    ),
    CurriculumEntry(
        week="5-6",
        title="Kubernetes",
        description="Kubernetes architecture, pods, services, deployments, and Helm charts",
        topics=("K8s Architecture", "Pods & Services", "Deployments", "Helm Charts"),
    ),
    CurriculumEntry(
        week="7-8",
        title="CI/CD",
        description="Jenkins, GitLab CI, automated testing, and deployment strategies",
        topics=("Jenkins", "GitLab CI", "Automated Testing", "Deployment Strategies"),
    ),
    CurriculumEntry(
        week="9-10",
        title="Infrastructure as Code",
        description="Terraform, Ansible, and infrastructure automation",
        topics=("Terraform", "Ansible", "Infrastructure Automation", "Cloud Providers"),
    ),
    CurriculumEntry(
        week="11-12",
        title="Monitoring & Security",
        description="Grafana, Prometheus, security best practices, and final project",
        topics=("Grafana", "Prometheus", "Security Best Practices", "Final Project"),
    ),
)

TOOLS: Tuple[ToolEntry, ...] = (
    ToolEntry(
        name="Docker",
        image="imgs/docker.png",
        description="Containerization platform for building, shipping, and running applications",
        category="Containerization",
    ),
    ToolEntry(
        name="Kubernetes",
        image="imgs/kubernetes-logo.svg.png",
        description="Container orchestration platform for managing containerized applications",
        category="Orchestration",
    ),
    ToolEntry(
        name="Jenkins",
        image="imgs/jenkins-logo.svg.png",
        description="Open-source automation server for CI/CD pipelines",
        category="CI/CD",
    ),
    ToolEntry(
        name="Terraform",
        image="imgs/terraform.png",
        description="Infrastructure as Code tool for building, changing, and versioning infrastructure",
        category="Infrastructure as Code",
    ),
    ToolEntry(
        name="ArgoCD",
        image="imgs/argo-cd.png",
        description="Declarative GitOps continuous delivery tool for Kubernetes",
        category="GitOps",
    ),
    ToolEntry(
        name="Helm",
        image="imgs/helm.png",
        description="The package manager for Kubernetes applications",
        category="Package Management",
    ),
    ToolEntry(
        name="GitLab",
        image="imgs/gitlab.png",
        description="Complete DevOps platform with integrated CI/CD capabilities",
        category="DevOps Platform",
    ),
    ToolEntry(
        name="Grafana",
        image="imgs/grafana.png",
        description="Analytics and monitoring platform for metrics and logs",
        category="Monitoring",
    ),
    ToolEntry(
        name="Harbor",
        image="imgs/harbor-logo.png",
        description="Enterprise-grade container registry with security and compliance features",
        category="Container Registry",
    ),
    ToolEntry(
        name="K3s",
        image="imgs/k3s.png",
        description="Lightweight Kubernetes distribution for edge and IoT",
        category="Lightweight K8s",
    ),
    ToolEntry(
        name="Longhorn",
        image="imgs/longhorn-logo.png",
        description="Cloud-native distributed block storage for Kubernetes",
        category="Storage",
    ),
    ToolEntry(
        name="RKE2",
        image="imgs/rke2-logo.jpeg",
        description="Rancher Kubernetes Engine 2 - enterprise-grade Kubernetes distribution",
        category="Enterprise K8s",
    ),
)
