"""CRUD services for the administrator-managed resources"""
from gymhub.models import Bill, DietDetail, FeePackage, Notification, Supplement
from gymhub.services.crud_service import CRUDService

fee_package_service = CRUDService(FeePackage, "Fee package", unique_field="name")
supplement_service = CRUDService(Supplement, "Supplement", unique_field="name")
diet_detail_service = CRUDService(DietDetail, "Diet detail", unique_field="title")
bill_service = CRUDService(Bill, "Bill")
notification_service = CRUDService(Notification, "Notification")
