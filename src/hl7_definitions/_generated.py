# Generated by hl7_definitions.compiler. Do not edit.
"""Static lookup store: HL7 tables and versioned definitions."""

from types import MappingProxyType

from hl7_definitions.models import (
    Definition,
    Field,
    FieldOptionality,
    FieldRepeatability,
    Message,
    MessageCompound,
    MessageSegment,
    Segment,
    SubField,
)

TABLE_1 = MappingProxyType({
    'A': 'Ambiguous',
    'F': 'Female',
    'M': 'Male',
    'N': 'Not applicable',
    'O': 'Other',
    'U': 'Unknown',
})

TABLE_1_ENTRIES = (
    ('A', 'Ambiguous'),
    ('F', 'Female'),
    ('M', 'Male'),
    ('N', 'Not applicable'),
    ('O', 'Other'),
    ('U', 'Unknown'),
)

TABLE_3 = MappingProxyType({
    'A01': 'ADT/ACK - Admit/visit notification',
    'A02': 'ADT/ACK - Transfer a patient',
    'A03': 'ADT/ACK - Discharge/end visit',
    'A04': 'ADT/ACK - Register a patient',
    'A08': 'ADT/ACK -  Update patient information',
    'Q11': 'QBP - Query by parameter requesting an RSP segment pattern response',
})

TABLE_3_ENTRIES = (
    ('A01', 'ADT/ACK - Admit/visit notification'),
    ('A02', 'ADT/ACK - Transfer a patient'),
    ('A03', 'ADT/ACK - Discharge/end visit'),
    ('A04', 'ADT/ACK - Register a patient'),
    ('A08', 'ADT/ACK -  Update patient information'),
    ('Q11', 'QBP - Query by parameter requesting an RSP segment pattern response'),
)

TABLE_7 = MappingProxyType({
    'A': 'Accident',
    'C': 'Elective',
    'E': 'Emergency',
    'L': 'Labor and Delivery',
    'N': 'Newborn (Birth in healthcare facility)',
    'R': 'Routine',
    'U': 'Urgent',
})

TABLE_7_ENTRIES = (
    ('A', 'Accident'),
    ('C', 'Elective'),
    ('E', 'Emergency'),
    ('L', 'Labor and Delivery'),
    ('N', 'Newborn (Birth in healthcare facility)'),
    ('R', 'Routine'),
    ('U', 'Urgent'),
)

TABLE_76 = MappingProxyType({
    'ACK': 'General acknowledgment message',
    'ADT': 'ADT message',
    'QBP': 'Query by parameter',
})

TABLE_76_ENTRIES = (
    ('ACK', 'General acknowledgment message'),
    ('ADT', 'ADT message'),
    ('QBP', 'Query by parameter'),
)

TABLE_91 = MappingProxyType({
    'D': 'Deferred',
    'I': 'Immediate',
})

TABLE_91_ENTRIES = (
    ('D', 'Deferred'),
    ('I', 'Immediate'),
)

TABLE_895 = MappingProxyType({
    'E': 'Exempt',
    'N': 'No',
    'U': 'Unknown',
    'W': 'Not applicable',
    'Y': 'Yes',
})

TABLE_895_ENTRIES = (
    ('E', 'Exempt'),
    ('N', 'No'),
    ('U', 'Unknown'),
    ('W', 'Not applicable'),
    ('Y', 'Yes'),
)

TABLE_DESCRIPTIONS = MappingProxyType({
    1: 'Administrative Sex',
    3: 'Event type',
    7: 'Admission type',
    76: 'Message type',
    91: 'Query priority',
    895: 'Present On Admission (POA) Indicator',
})

TABLES = MappingProxyType({
    1: TABLE_1,
    3: TABLE_3,
    7: TABLE_7,
    76: TABLE_76,
    91: TABLE_91,
    895: TABLE_895,
})

TABLE_ENTRIES = MappingProxyType({
    1: TABLE_1_ENTRIES,
    3: TABLE_3_ENTRIES,
    7: TABLE_7_ENTRIES,
    76: TABLE_76_ENTRIES,
    91: TABLE_91_ENTRIES,
    895: TABLE_895_ENTRIES,
})

DEFS_V2_3_FIELDS = MappingProxyType({
    'ID': Field('Coded values for HL7 tables', ()),
    'ST': Field('String data', ()),
})

DEFS_V2_3_SEGMENTS = MappingProxyType({
    'MSH': Segment('Message header segment', (
        SubField('ST', 'Field Separator', FieldOptionality.REQUIRED, FieldRepeatability.single(), 1, None),
        SubField('ST', 'Encoding Characters', FieldOptionality.REQUIRED, FieldRepeatability.single(), 4, None),
        SubField('HD', 'Sending Application', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 180, 361),
        SubField('HD', 'Sending Facility', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 180, 362),
        SubField('HD', 'Receiving Application', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 180, 361),
        SubField('HD', 'Receiving Facility', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 180, 362),
        SubField('TS', 'Date/Time Of Message', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 26, None),
        SubField('ST', 'Security', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 40, None),
        SubField('CM', 'Message Type', FieldOptionality.REQUIRED, FieldRepeatability.single(), 7, 76),
        SubField('ST', 'Message Control ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 20, None),
        SubField('PT', 'Processing ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 3, None),
        SubField('ID', 'Version ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 8, 104),
        SubField('NM', 'Sequence Number', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 15, None),
        SubField('ST', 'Continuation Pointer', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 180, None),
        SubField('ID', 'Accept Acknowledgement Type', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 2, 155),
        SubField('ID', 'Application Acknowledgement Type', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 2, 155),
        SubField('ID', 'Country Code', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 2, None),
        SubField('ID', 'Character Set', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 6, 211),
        SubField('CE', 'Principal Language Of Message', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 60, None),
    )),
})

DEFS_V2_3_MESSAGES = MappingProxyType({
    'ADT_A01': Message('ADT_A01', 'Admit a patient', (
        MessageSegment('MSH', 'Message header segment', 1, 1, None, None),
        MessageSegment('EVN', 'Event type', 1, 1, None, None),
        MessageSegment('PID', 'Patient Identification', 1, 1, None, None),
        MessageSegment('PV1', 'Patient visit', 1, 1, None, None),
    )),
})

DEFS_V2_5_1_FIELDS = MappingProxyType({
    'AD': Field('Address', (
        SubField('ST', 'Street Address', FieldOptionality.REQUIRED, FieldRepeatability.single(), 120, None),
        SubField('ST', 'Other Designation', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 120, None),
        SubField('ST', 'City', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 50, None),
        SubField('ST', 'State or Province', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 50, None),
        SubField('ST', 'Zip or Postal Code', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 12, None),
        SubField('ID', 'Country', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 3, 399),
        SubField('ID', 'Address Type', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 3, 190),
        SubField('ST', 'Other Geographic Designation', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 50, None),
    )),
    'CE': Field('Coded Element', (
        SubField('ST', 'Identifier', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, None),
        SubField('ST', 'Text', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 199, None),
        SubField('ID', 'Name of Coding System', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, 396),
        SubField('ST', 'Alternate Identifier', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, None),
        SubField('ST', 'Alternate Text', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 199, None),
        SubField('ID', 'Name of Alternate Coding System', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, 396),
    )),
    'DTM': Field('Date/Time', ()),
    'EI': Field('Entity Identifier', (
        SubField('ST', 'Entity Identifier', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 199, None),
        SubField('IS', 'Namespace ID', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, 363),
        SubField('ST', 'Universal ID', FieldOptionality.CONDITIONAL, FieldRepeatability.single(), 199, None),
        SubField('ID', 'Universal ID Type', FieldOptionality.CONDITIONAL, FieldRepeatability.single(), 6, 301),
    )),
    'HD': Field('Hierarchic Designator', (
        SubField('IS', 'Namespace ID', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, 300),
        SubField('ST', 'Universal ID', FieldOptionality.CONDITIONAL, FieldRepeatability.single(), 199, None),
        SubField('ID', 'Universal ID Type', FieldOptionality.CONDITIONAL, FieldRepeatability.single(), 6, 301),
    )),
    'ID': Field('Coded Value for HL7 Defined Tables', ()),
    'IS': Field('Coded Value for User-Defined Tables', ()),
    'MSG': Field('Message Type', (
        SubField('ID', 'Message Code', FieldOptionality.REQUIRED, FieldRepeatability.single(), 3, 76),
        SubField('ID', 'Trigger Event', FieldOptionality.REQUIRED, FieldRepeatability.single(), 3, 3),
        SubField('ID', 'Message Structure', FieldOptionality.REQUIRED, FieldRepeatability.single(), 7, 354),
    )),
    'NM': Field('Numeric', ()),
    'PT': Field('Processing Type', (
        SubField('ID', 'Processing ID', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 1, 103),
        SubField('ID', 'Processing Mode', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 1, 207),
    )),
    'SI': Field('Sequence ID', ()),
    'ST': Field('String Data', ()),
    'TS': Field('Time Stamp', (
        SubField('DTM', 'Time', FieldOptionality.REQUIRED, FieldRepeatability.single(), 24, None),
        SubField('ID', 'Degree of Precision', FieldOptionality.BACKWARD_COMPATIBILITY, FieldRepeatability.single(), 1, 529),
    )),
    'VID': Field('Version Identifier', (
        SubField('ID', 'Version ID', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 5, 104),
        SubField('CE', 'Internationalization Code', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 483, None),
        SubField('CE', 'International Version ID', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 483, None),
    )),
})

DEFS_V2_5_1_SEGMENTS = MappingProxyType({
    'ERR': Segment('Error', (
        SubField('ELD', 'Error Code and Location', FieldOptionality.BACKWARD_COMPATIBILITY, FieldRepeatability.unbounded(), 493, None),
        SubField('ERL', 'Error Location', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 18, None),
        SubField('CWE', 'HL7 Error Code', FieldOptionality.REQUIRED, FieldRepeatability.single(), 705, 357),
        SubField('ID', 'Severity', FieldOptionality.REQUIRED, FieldRepeatability.single(), 2, 516),
        SubField('CWE', 'Application Error Code', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 705, 533),
        SubField('ST', 'Application Error Parameter', FieldOptionality.OPTIONAL, FieldRepeatability.bounded(10), 80, None),
        SubField('TX', 'Diagnostic Information', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 2048, None),
        SubField('TX', 'User Message', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 250, None),
        SubField('IS', 'Inform Person Indicator', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 20, 517),
        SubField('CWE', 'Override Type', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 705, 518),
        SubField('CWE', 'Override Reason Code', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 705, 519),
        SubField('XTN', 'Help Desk Contact Point', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 652, None),
    )),
    'EVN': Segment('Event Type', (
        SubField('ID', 'Event Type Code', FieldOptionality.BACKWARD_COMPATIBILITY, FieldRepeatability.single(), 3, 3),
        SubField('TS', 'Recorded Date/Time', FieldOptionality.REQUIRED, FieldRepeatability.single(), 26, None),
        SubField('TS', 'Date/Time Planned Event', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 26, None),
        SubField('IS', 'Event Reason Code', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 3, 62),
        SubField('XCN', 'Operator ID', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 250, 188),
        SubField('TS', 'Event Occurred', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 26, None),
        SubField('HD', 'Event Facility', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 241, None),
    )),
    'MSA': Segment('Message Acknowledgment', (
        SubField('ID', 'Acknowledgment Code', FieldOptionality.REQUIRED, FieldRepeatability.single(), 2, 8),
        SubField('ST', 'Message Control ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 20, None),
        SubField('ST', 'Text Message', FieldOptionality.BACKWARD_COMPATIBILITY, FieldRepeatability.single(), 80, None),
        SubField('NM', 'Expected Sequence Number', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 15, None),
        SubField('ID', 'Delayed Acknowledgment Type', FieldOptionality.BACKWARD_COMPATIBILITY, FieldRepeatability.single(), None, None),
        SubField('CE', 'Error Condition', FieldOptionality.BACKWARD_COMPATIBILITY, FieldRepeatability.single(), 250, 357),
    )),
    'MSH': Segment('Message Header', (
        SubField('ST', 'Field Separator', FieldOptionality.REQUIRED, FieldRepeatability.single(), 1, None),
        SubField('ST', 'Encoding Characters', FieldOptionality.REQUIRED, FieldRepeatability.single(), 4, None),
        SubField('HD', 'Sending Application', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 227, 361),
        SubField('HD', 'Sending Facility', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 227, 362),
        SubField('HD', 'Receiving Application', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 227, 361),
        SubField('HD', 'Receiving Facility', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 227, 362),
        SubField('TS', 'Date/Time Of Message', FieldOptionality.REQUIRED, FieldRepeatability.single(), 26, None),
        SubField('ST', 'Security', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 40, None),
        SubField('MSG', 'Message Type', FieldOptionality.REQUIRED, FieldRepeatability.single(), 15, None),
        SubField('ST', 'Message Control ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 20, None),
        SubField('PT', 'Processing ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 3, None),
        SubField('VID', 'Version ID', FieldOptionality.REQUIRED, FieldRepeatability.single(), 60, None),
        SubField('NM', 'Sequence Number', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 15, None),
        SubField('ST', 'Continuation Pointer', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 180, None),
        SubField('ID', 'Accept Acknowledgment Type', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 2, 155),
        SubField('ID', 'Application Acknowledgment Type', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 2, 155),
        SubField('ID', 'Country Code', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 3, 399),
        SubField('ID', 'Character Set', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 16, 211),
        SubField('CE', 'Principal Language Of Message', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 250, None),
        SubField('ID', 'Alternate Character Set Handling Scheme', FieldOptionality.OPTIONAL, FieldRepeatability.single(), 20, 356),
        SubField('EI', 'Message Profile Identifier', FieldOptionality.OPTIONAL, FieldRepeatability.unbounded(), 427, None),
    )),
})

DEFS_V2_5_1_MESSAGES = MappingProxyType({
    'ACK': Message('ACK', 'General acknowledgment message', (
        MessageSegment('MSH', 'Message Header', 1, 1, None, None),
        MessageSegment('SFT', 'Software Segment', 0, 99999, None, None),
        MessageSegment('MSA', 'Message Acknowledgment', 1, 1, None, None),
        MessageSegment('ERR', 'Error', 0, 99999, None, None),
    )),
    'ADT_A01': Message('ADT_A01', 'Admit/Visit Notification', (
        MessageSegment('MSH', 'Message Header', 1, 1, None, None),
        MessageSegment('SFT', 'Software Segment', 0, 99999, None, None),
        MessageSegment('EVN', 'Event Type', 1, 1, None, None),
        MessageSegment('PID', 'Patient Identification', 1, 1, None, None),
        MessageSegment('PD1', 'Patient Additional Demographic', 0, 1, None, None),
        MessageSegment('ROL', 'Role', 0, 99999, None, None),
        MessageSegment('NK1', 'Next of Kin / Associated Parties', 0, 99999, None, None),
        MessageSegment('PV1', 'Patient Visit', 1, 1, None, None),
        MessageSegment('PV2', 'Patient Visit - Additional Information', 0, 1, None, None),
        MessageSegment('ROL', 'Role', 0, 99999, None, None),
        MessageSegment('DB1', 'Disability', 0, 99999, None, None),
        MessageSegment('OBX', 'Observation/Result', 0, 99999, None, None),
        MessageSegment('AL1', 'Patient Allergy Information', 0, 99999, None, None),
        MessageSegment('DG1', 'Diagnosis', 0, 99999, None, None),
        MessageSegment('DRG', 'Diagnosis Related Group', 0, 1, None, None),
        MessageSegment('PROCEDURE', 'Procedure group', 0, 99999, (
            MessageSegment('PR1', 'Procedures', 1, 1, None, None),
            MessageSegment('ROL', 'Role', 0, 99999, None, None),
        ), None),
        MessageSegment('GT1', 'Guarantor', 0, 99999, None, None),
        MessageSegment('INSURANCE', 'Insurance group', 0, 99999, (
            MessageSegment('IN1', 'Insurance', 1, 1, None, None),
            MessageSegment('IN2', 'Insurance Additional Information', 0, 1, None, None),
            MessageSegment('IN3', 'Insurance Additional Information, Certification', 0, 99999, None, None),
            MessageSegment('ROL', 'Role', 0, 99999, None, None),
        ), None),
        MessageSegment('ACC', 'Accident', 0, 1, None, None),
        MessageSegment('UB1', 'UB82', 0, 1, None, None),
        MessageSegment('UB2', 'UB92 Data', 0, 1, None, None),
        MessageSegment('PDA', 'Patient Death and Autopsy', 0, 1, None, None),
    )),
    'QBP_Q11': Message('QBP_Q11', 'Query by parameter requesting an RSP segment pattern response', (
        MessageSegment('MSH', 'Message Header', 1, 1, None, None),
        MessageSegment('SFT', 'Software Segment', 0, 99999, None, None),
        MessageSegment('QPD', 'Query Parameter Definition', 1, 1, None, None),
        MessageSegment('ANY', 'Query parameters', 0, 1, None, (
            MessageCompound('RDF', 'Table Row Definition', 0, 1),
            MessageCompound(None, 'Any HL7 segment', 0, 1),
        )),
        MessageSegment('RCP', 'Response Control Parameter', 1, 1, None, None),
        MessageSegment('DSC', 'Continuation Pointer', 0, 1, None, None),
    )),
})

DEFINITIONS = MappingProxyType({
    '2.3': Definition(DEFS_V2_3_FIELDS, DEFS_V2_3_SEGMENTS, DEFS_V2_3_MESSAGES),
    '2.5.1': Definition(DEFS_V2_5_1_FIELDS, DEFS_V2_5_1_SEGMENTS, DEFS_V2_5_1_MESSAGES),
})

VERSIONS = ('2.3', '2.5.1')
