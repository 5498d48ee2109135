from clinic.models.patient_models import Patient, LastVisit
from clinic.models.appointment_models import Appointment, ApprovedAppointment, DeletedAppointment
from clinic.models.invoice_models import Invoice, InvoiceItem
from clinic.models.drug_models import Drug
from clinic.models.feedback_models import Review, Contact
from clinic.models.clinic_models import Doctor, Clinic, SocialMediaSettings, DoctorPhoto, ClinicPhoto
from clinic.models.system_models import UserPreferences, Todo
