# Copyright 2008-2021 pydicom authors. See LICENSE file for details.
"""DICOM data dictionary used by the scanner.

Covers the elements found in the large majority of files rather than the
whole of Part 6 of the DICOM Standard. Each entry maps the tag to its
``(VR, name)``. The table is read-only.
"""
from types import MappingProxyType


DicomDictionary = MappingProxyType({
    0x00020002: ("UI", "Media Storage SOP Class UID"),
    0x00020003: ("UI", "Media Storage SOP Instance UID"),
    0x00020010: ("UI", "Transfer Syntax UID"),
    0x00020012: ("UI", "Implementation Class UID"),
    0x00020013: ("SH", "Implementation Version Name"),
    0x00020016: ("AE", "Source Application Entity Title"),
    0x00080005: ("CS", "Specific Character Set"),
    0x00080008: ("CS", "Image Type"),
    0x00080010: ("CS", "Recognition Code"),
    0x00080012: ("DA", "Instance Creation Date"),
    0x00080013: ("TM", "Instance Creation Time"),
    0x00080014: ("UI", "Instance Creator UID"),
    0x00080016: ("UI", "SOP Class UID"),
    0x00080018: ("UI", "SOP Instance UID"),
    0x00080020: ("DA", "Study Date"),
    0x00080021: ("DA", "Series Date"),
    0x00080022: ("DA", "Acquisition Date"),
    0x00080023: ("DA", "Content Date"),
    0x00080024: ("DA", "Overlay Date"),
    0x00080025: ("DA", "Curve Date"),
    0x00080030: ("TM", "Study Time"),
    0x00080031: ("TM", "Series Time"),
    0x00080032: ("TM", "Acquisition Time"),
    0x00080033: ("TM", "Content Time"),
    0x00080034: ("TM", "Overlay Time"),
    0x00080035: ("TM", "Curve Time"),
    0x00080040: ("US", "Data Set Type"),
    0x00080041: ("LO", "Data Set Subtype"),
    0x00080042: ("CS", "Nuclear Medicine Series Type"),
    0x00080050: ("SH", "Accession Number"),
    0x00080052: ("CS", "Query/Retrieve Level"),
    0x00080054: ("AE", "Retrieve AE Title"),
    0x00080058: ("AE", "Failed SOP Instance UID List"),
    0x00080060: ("CS", "Modality"),
    0x00080064: ("CS", "Conversion Type"),
    0x00080068: ("CS", "Presentation Intent Type"),
    0x00080070: ("LO", "Manufacturer"),
    0x00080080: ("LO", "Institution Name"),
    0x00080081: ("ST", "Institution Address"),
    0x00080082: ("SQ", "Institution Code Sequence"),
    0x00080090: ("PN", "Referring Physician's Name"),
    0x00080092: ("ST", "Referring Physician's Address"),
    0x00080094: ("SH", "Referring Physician's Telephone Numbers"),
    0x00080096: ("SQ", "Referring Physician Identification Sequence"),
    0x00080100: ("SH", "Code Value"),
    0x00080102: ("SH", "Coding Scheme Designator"),
    0x00080103: ("SH", "Coding Scheme Version"),
    0x00080104: ("LO", "Code Meaning"),
    0x00080201: ("SH", "Timezone Offset From UTC"),
    0x00081010: ("SH", "Station Name"),
    0x00081030: ("LO", "Study Description"),
    0x00081032: ("SQ", "Procedure Code Sequence"),
    0x0008103E: ("LO", "Series Description"),
    0x00081040: ("LO", "Institutional Department Name"),
    0x00081048: ("PN", "Physician(s) of Record"),
    0x00081050: ("PN", "Performing Physician's Name"),
    0x00081060: ("PN", "Name of Physician(s) Reading Study"),
    0x00081070: ("PN", "Operator's Name"),
    0x00081080: ("LO", "Admitting Diagnoses Description"),
    0x00081084: ("SQ", "Admitting Diagnoses Code Sequence"),
    0x00081090: ("LO", "Manufacturer's Model Name"),
    0x00081100: ("SQ", "Referenced Results Sequence"),
    0x00081110: ("SQ", "Referenced Study Sequence"),
    0x00081111: ("SQ", "Referenced Performed Procedure Step Sequence"),
    0x00081115: ("SQ", "Referenced Series Sequence"),
    0x00081120: ("SQ", "Referenced Patient Sequence"),
    0x00081125: ("SQ", "Referenced Visit Sequence"),
    0x00081130: ("SQ", "Referenced Overlay Sequence"),
    0x00081140: ("SQ", "Referenced Image Sequence"),
    0x00081145: ("SQ", "Referenced Curve Sequence"),
    0x00081150: ("UI", "Referenced SOP Class UID"),
    0x00081155: ("UI", "Referenced SOP Instance UID"),
    0x00082111: ("ST", "Derivation Description"),
    0x00082112: ("SQ", "Source Image Sequence"),
    0x00082120: ("SH", "Stage Name"),
    0x00082122: ("IS", "Stage Number"),
    0x00082124: ("IS", "Number of Stages"),
    0x00082129: ("IS", "Number of Event Timers"),
    0x00082128: ("IS", "View Number"),
    0x0008212A: ("IS", "Number of Views in Stage"),
    0x00082130: ("DS", "Event Elapsed Time(s)"),
    0x00082132: ("LO", "Event Timer Name(s)"),
    0x00082142: ("IS", "Start Trim"),
    0x00082143: ("IS", "Stop Trim"),
    0x00082144: ("IS", "Recommended Display Frame Rate"),
    0x00082200: ("CS", "Transducer Position"),
    0x00082204: ("CS", "Transducer Orientation"),
    0x00082208: ("CS", "Anatomic Structure"),
    0x00100010: ("PN", "Patient's Name"),
    0x00100020: ("LO", "Patient ID"),
    0x00100021: ("LO", "Issuer of Patient ID"),
    0x00100022: ("CS", "Type of Patient ID"),
    0x00100030: ("DA", "Patient's Birth Date"),
    0x00100032: ("TM", "Patient's Birth Time"),
    0x00100040: ("CS", "Patient's Sex"),
    0x00100050: ("SQ", "Patient's Insurance Plan Code Sequence"),
    0x00100101: ("SQ", "Patient's Primary Language Code Sequence"),
    0x00100102: ("SQ", "Patient's Primary Language Modifier Code Sequence"),
    0x00101000: ("LO", "Other Patient IDs"),
    0x00101001: ("PN", "Other Patient Names"),
    0x00101005: ("PN", "Patient's Birth Name"),
    0x00101010: ("AS", "Patient's Age"),
    0x00101020: ("DS", "Patient's Size"),
    0x00101030: ("DS", "Patient's Weight"),
    0x00101040: ("LO", "Patient's Address"),
    0x00101050: ("LO", "Insurance Plan Identification"),
    0x00102000: ("LO", "Medical Alerts"),
    0x00102110: ("LO", "Allergies"),
    0x00102150: ("LO", "Country of Residence"),
    0x00102152: ("LO", "Region of Residence"),
    0x00102154: ("SH", "Patient's Telephone Numbers"),
    0x00102160: ("SH", "Ethnic Group"),
    0x00102180: ("SH", "Occupation"),
    0x001021A0: ("CS", "Smoking Status"),
    0x001021B0: ("LT", "Additional Patient History"),
    0x00102201: ("LO", "Patient Species Description"),
    0x00102203: ("CS", "Patient Sex Neutered"),
    0x00102292: ("LO", "Patient Breed Description"),
    0x00102297: ("PN", "Responsible Person"),
    0x00102298: ("CS", "Responsible Person Role"),
    0x00102299: ("CS", "Responsible Organization"),
    0x00104000: ("LT", "Patient Comments"),
    0x00180010: ("LO", "Contrast/Bolus Agent"),
    0x00180015: ("CS", "Body Part Examined"),
    0x00180020: ("CS", "Scanning Sequence"),
    0x00180021: ("CS", "Sequence Variant"),
    0x00180022: ("CS", "Scan Options"),
    0x00180023: ("CS", "MR Acquisition Type"),
    0x00180024: ("SH", "Sequence Name"),
    0x00180025: ("CS", "Angio Flag"),
    0x00180030: ("LO", "Radionuclide"),
    0x00180031: ("LO", "Radiopharmaceutical"),
    0x00180032: ("DS", "Energy Window Centerline"),
    0x00180033: ("DS", "Energy Window Total Width"),
    0x00180034: ("LO", "Intervention Drug Name"),
    0x00180035: ("TM", "Intervention Drug Start Time"),
    0x00180040: ("IS", "Cine Rate"),
    0x00180050: ("DS", "Slice Thickness"),
    0x00180060: ("DS", "KVP"),
    0x00180070: ("IS", "Counts Accumulated"),
    0x00180071: ("CS", "Acquisition Termination Condition"),
    0x00180072: ("DS", "Effective Duration"),
    0x00180073: ("CS", "Acquisition Start Condition"),
    0x00180074: ("IS", "Acquisition Start Condition Data"),
    0x00180075: ("IS", "Acquisition Termination Condition Data"),
    0x00180080: ("DS", "Repetition Time"),
    0x00180081: ("DS", "Echo Time"),
    0x00180082: ("DS", "Inversion Time"),
    0x00180083: ("DS", "Number of Averages"),
    0x00180084: ("DS", "Imaging Frequency"),
    0x00180085: ("SH", "Imaged Nucleus"),
    0x00180086: ("IS", "Echo Numbers(s)"),
    0x00180087: ("DS", "Magnetic Field Strength"),
    0x00180088: ("DS", "Spacing Between Slices"),
    0x00180089: ("IS", "Number of Phase Encoding Steps"),
    0x00180090: ("DS", "Data Collection Diameter"),
    0x00180091: ("IS", "Echo Train Length"),
    0x00180093: ("DS", "Percent Sampling"),
    0x00180094: ("DS", "Percent Phase Field of View"),
    0x00180095: ("DS", "Pixel Bandwidth"),
    0x00181000: ("LO", "Device Serial Number"),
    0x00181004: ("LO", "Plate ID"),
    0x00181010: ("LO", "Secondary Capture Device ID"),
    0x00181012: ("DA", "Date of Secondary Capture"),
    0x00181014: ("TM", "Time of Secondary Capture"),
    0x00181016: ("LO", "Secondary Capture Device Manufacturer"),
    0x00181018: ("LO", "Secondary Capture Device Manufacturer's Model Name"),
    0x00181019: ("LO", "Secondary Capture Device Software Versions"),
    0x00181020: ("LO", "Software Versions(s)"),
    0x00181022: ("SH", "Video Image Format Acquired"),
    0x00181023: ("LO", "Digital Image Format Acquired"),
    0x00181030: ("LO", "Protocol Name"),
    0x00181040: ("LO", "Contrast/Bolus Route"),
    0x00181041: ("DS", "Contrast/Bolus Volume"),
    0x00181042: ("TM", "Contrast/Bolus Start Time"),
    0x00181043: ("TM", "Contrast/Bolus Stop Time"),
    0x00181044: ("DS", "Contrast/Bolus Total Dose"),
    0x00181045: ("IS", "Syringe Counts"),
    0x00181050: ("DS", "Spatial Resolution"),
    0x00181060: ("DS", "Trigger Time"),
    0x00181061: ("LO", "Trigger Source or Type"),
    0x00181062: ("IS", "Nominal Interval"),
    0x00181063: ("DS", "Frame Time"),
    0x00181064: ("LO", "Cardiac Framing Type"),
    0x00181065: ("DS", "Frame Time Vector"),
    0x00181066: ("DS", "Frame Delay"),
    0x00181070: ("LO", "Radiopharmaceutical Route"),
    0x00181071: ("DS", "Radiopharmaceutical Volume"),
    0x00181072: ("TM", "Radiopharmaceutical Start Time"),
    0x00181073: ("TM", "Radiopharmaceutical Stop Time"),
    0x00181074: ("DS", "Radionuclide Total Dose"),
    0x00181075: ("DS", "Radionuclide Half Life"),
    0x00181076: ("DS", "Radionuclide Positron Fraction"),
    0x00181080: ("CS", "Beat Rejection Flag"),
    0x00181081: ("IS", "Low R-R Value"),
    0x00181082: ("IS", "High R-R Value"),
    0x00181083: ("IS", "Intervals Acquired"),
    0x00181084: ("IS", "Intervals Rejected"),
    0x00181085: ("LO", "PVC Rejection"),
    0x00181086: ("IS", "Skip Beats"),
    0x00181088: ("IS", "Heart Rate"),
    0x00181090: ("IS", "Cardiac Number of Images"),
    0x00181094: ("IS", "Trigger Window"),
    0x00181100: ("DS", "Reconstruction Diameter"),
    0x00181110: ("DS", "Distance Source to Detector"),
    0x00181111: ("DS", "Distance Source to Patient"),
    0x00181120: ("DS", "Gantry/Detector Tilt"),
    0x00181130: ("DS", "Table Height"),
    0x00181131: ("DS", "Table Traverse"),
    0x00181140: ("CS", "Rotation Direction"),
    0x00181141: ("DS", "Angular Position"),
    0x00181142: ("DS", "Radial Position"),
    0x00181143: ("DS", "Scan Arc"),
    0x00181144: ("DS", "Angular Step"),
    0x00181145: ("DS", "Center of Rotation Offset"),
    0x00181146: ("DS", "Rotation Offset"),
    0x00181147: ("CS", "Field of View Shape"),
    0x00181149: ("IS", "Field of View Dimensions(s)"),
    0x00181150: ("IS", "Exposure Time"),
    0x00181151: ("IS", "X-ray Tube Current"),
    0x00181152: ("IS", "Exposure"),
    0x00181153: ("IS", "Exposure in uAs"),
    0x00181154: ("DS", "Average Pulse Width"),
    0x00181155: ("CS", "Radiation Setting"),
    0x00181156: ("CS", "Rectification Type"),
    0x0018115A: ("CS", "Radiation Mode"),
    0x0018115E: ("DS", "Image and Fluoroscopy Area Dose Product"),
    0x00181160: ("SH", "Filter Type"),
    0x00181161: ("LO", "Type of Filters"),
    0x00181162: ("DS", "Intensifier Size"),
    0x00181164: ("DS", "Imager Pixel Spacing"),
    0x00181166: ("CS", "Grid"),
    0x00181170: ("IS", "Generator Power"),
    0x00181180: ("SH", "Collimator/grid Name"),
    0x00181181: ("CS", "Collimator Type"),
    0x00181182: ("IS", "Focal Distance"),
    0x00181183: ("DS", "X Focus Center"),
    0x00181184: ("DS", "Y Focus Center"),
    0x00181190: ("DS", "Focal Spot(s)"),
    0x00181191: ("CS", "Anode Target Material"),
    0x001811A0: ("DS", "Body Part Thickness"),
    0x001811A2: ("DS", "Compression Force"),
    0x00181200: ("DA", "Date of Last Calibration"),
    0x00181201: ("TM", "Time of Last Calibration"),
    0x00181210: ("SH", "Convolution Kernel"),
    0x00181242: ("IS", "Actual Frame Duration"),
    0x00181243: ("IS", "Count Rate"),
    0x00181250: ("SH", "Receive Coil Name"),
    0x00181251: ("SH", "Transmit Coil Name"),
    0x00181260: ("SH", "Plate Type"),
    0x00181261: ("LO", "Phosphor Type"),
    0x00181300: ("IS", "Scan Velocity"),
    0x00181301: ("CS", "Whole Body Technique"),
    0x00181302: ("IS", "Scan Length"),
    0x00181310: ("US", "Acquisition Matrix"),
    0x00181312: ("CS", "In-plane Phase Encoding Direction"),
    0x00181314: ("DS", "Flip Angle"),
    0x00181315: ("CS", "Variable Flip Angle Flag"),
    0x00181316: ("DS", "SAR"),
    0x00181318: ("DS", "dB/dt"),
    0x00181400: ("LO", "Acquisition Device Processing Description"),
    0x00181401: ("LO", "Acquisition Device Processing Code"),
    0x00181402: ("CS", "Cassette Orientation"),
    0x00181403: ("CS", "Cassette Size"),
    0x00181404: ("US", "Exposures on Plate"),
    0x00181405: ("IS", "Relative X-Ray Exposure"),
    0x00181450: ("CS", "Column Angulation"),
    0x00181500: ("CS", "Positioner Motion"),
    0x00181508: ("CS", "Positioner Type"),
    0x00181510: ("DS", "Positioner Primary Angle"),
    0x00181511: ("DS", "Positioner Secondary Angle"),
    0x00181520: ("DS", "Positioner Primary Angle Increment"),
    0x00181521: ("DS", "Positioner Secondary Angle Increment"),
    0x00181530: ("DS", "Detector Primary Angle"),
    0x00181531: ("DS", "Detector Secondary Angle"),
    0x00181600: ("CS", "Shutter Shape"),
    0x00181602: ("IS", "Shutter Left Vertical Edge"),
    0x00181604: ("IS", "Shutter Right Vertical Edge"),
    0x00181606: ("IS", "Shutter Upper Horizontal Edge"),
    0x00181608: ("IS", "Shutter Lower Horizontal Edge"),
    0x00181610: ("IS", "Center of Circular Shutter"),
    0x00181612: ("IS", "Radius of Circular Shutter"),
    0x00181620: ("IS", "Vertices of the Polygonal Shutter"),
    0x00181700: ("IS", "Collimator Shape"),
    0x00181702: ("IS", "Collimator Left Vertical Edge"),
    0x00181704: ("IS", "Collimator Right Vertical Edge"),
    0x00181706: ("IS", "Collimator Upper Horizontal Edge"),
    0x00181708: ("IS", "Collimator Lower Horizontal Edge"),
    0x00181710: ("IS", "Center of Circular Collimator"),
    0x00181712: ("IS", "Radius of Circular Collimator"),
    0x00181720: ("IS", "Vertices of the Polygonal Collimator"),
    0x00185000: ("SH", "Output Power"),
    0x00185010: ("LO", "Transducer Data"),
    0x00185012: ("DS", "Focus Depth"),
    0x00185020: ("LO", "Processing Function"),
    0x00185021: ("LO", "Postprocessing Function"),
    0x00185022: ("DS", "Mechanical Index"),
    0x00185024: ("DS", "Bone Thermal Index"),
    0x00185026: ("DS", "Cranial Thermal Index"),
    0x00185027: ("DS", "Soft Tissue Thermal Index"),
    0x00185028: ("DS", "Soft Tissue-focus Thermal Index"),
    0x00185029: ("DS", "Soft Tissue-surface Thermal Index"),
    0x00185050: ("IS", "Depth of Scan Field"),
    0x00185100: ("CS", "Patient Position"),
    0x00185101: ("CS", "View Position"),
    0x00185104: ("SQ", "Projection Eponymous Name Code Sequence"),
    0x00185210: ("DS", "Image Transformation Matrix"),
    0x00185212: ("DS", "Image Translation Vector"),
    0x00186000: ("DS", "Sensitivity"),
    0x00186011: ("SQ", "Sequence of Ultrasound Regions"),
    0x00186012: ("US", "Region Spatial Format"),
    0x00186014: ("US", "Region Data Type"),
    0x00186016: ("UL", "Region Flags"),
    0x00186018: ("UL", "Region Location Min X0"),
    0x0018601A: ("UL", "Region Location Min Y0"),
    0x0018601C: ("UL", "Region Location Max X1"),
    0x0018601E: ("UL", "Region Location Max Y1"),
    0x00186020: ("SL", "Reference Pixel X0"),
    0x00186022: ("SL", "Reference Pixel Y0"),
    0x00186024: ("US", "Physical Units X Direction"),
    0x00186026: ("US", "Physical Units Y Direction"),
    0x00181628: ("FD", "Reference Pixel Physical Value X"),
    0x0018602A: ("FD", "Reference Pixel Physical Value Y"),
    0x0018602C: ("FD", "Physical Delta X"),
    0x0018602E: ("FD", "Physical Delta Y"),
    0x00186030: ("UL", "Transducer Frequency"),
    0x00186031: ("CS", "Transducer Type"),
    0x00186032: ("UL", "Pulse Repetition Frequency"),
    0x00186034: ("FD", "Doppler Correction Angle"),
    0x00186036: ("FD", "Steering Angle"),
    0x00186038: ("UL", "Doppler Sample Volume X Position (Retired)"),
    0x00186039: ("SL", "Doppler Sample Volume X Position"),
    0x0018603A: ("UL", "Doppler Sample Volume Y Position (Retired)"),
    0x0018603B: ("SL", "Doppler Sample Volume Y Position"),
    0x0018603C: ("UL", "TM-Line Position X0 (Retired)"),
    0x0018603D: ("SL", "TM-Line Position X0"),
    0x0018603E: ("UL", "TM-Line Position Y0 (Retired)"),
    0x0018603F: ("SL", "TM-Line Position Y0"),
    0x00186040: ("UL", "TM-Line Position X1 (Retired)"),
    0x00186041: ("SL", "TM-Line Position X1"),
    0x00186042: ("UL", "TM-Line Position Y1 (Retired)"),
    0x00186043: ("SL", "TM-Line Position Y1"),
    0x00186044: ("US", "Pixel Component Organization"),
    0x00186046: ("UL", "Pixel Component Mask"),
    0x00186048: ("UL", "Pixel Component Range Start"),
    0x0018604A: ("UL", "Pixel Component Range Stop"),
    0x0018604C: ("US", "Pixel Component Physical Units"),
    0x0018604E: ("US", "Pixel Component Data Type"),
    0x00186050: ("UL", "Number of Table Break Points"),
    0x00186052: ("UL", "Table of X Break Points"),
    0x00186054: ("FD", "Table of Y Break Points"),
    0x00186056: ("UL", "Number of Table Entries"),
    0x00186058: ("UL", "Table of Pixel Values"),
    0x0018605A: ("UL", "Table of Parameter Values"),
    0x00187000: ("CS", "Detector Conditions Nominal Flag"),
    0x00187001: ("DS", "Detector Temperature"),
    0x00187004: ("CS", "Detector Type"),
    0x00187005: ("CS", "Detector Configuration"),
    0x00187006: ("LT", "Detector Description"),
    0x00187008: ("LT", "Detector Mode"),
    0x0018700A: ("SH", "Detector ID"),
    0x0018700C: ("DA", "Date of Last Detector Calibration"),
    0x0018700E: ("TM", "Time of Last Detector Calibration"),
    0x00187010: ("IS", "Exposures on Detector Since Last Calibration"),
    0x00187011: ("IS", "Exposures on Detector Since Manufactured"),
    0x00187012: ("DS", "Detector Time Since Last Exposure"),
    0x00187014: ("DS", "Detector Active Time"),
    0x00187016: ("DS", "Detector Activation Offset From Exposure"),
    0x0018701A: ("DS", "Detector Binning"),
    0x00187020: ("DS", "Detector Element Physical Size"),
    0x00187022: ("DS", "Detector Element Spacing"),
    0x00187024: ("CS", "Detector Active Shape"),
    0x00187026: ("DS", "Detector Active Dimension(s)"),
    0x00187028: ("DS", "Detector Active Origin"),
    0x00187030: ("DS", "Field of View Origin"),
    0x00187032: ("DS", "Field of View Rotation"),
    0x00187034: ("CS", "Field of View Horizontal Flip"),
    0x00187040: ("LT", "Grid Absorbing Material"),
    0x00187041: ("LT", "Grid Spacing Material"),
    0x00187042: ("DS", "Grid Thickness"),
    0x00187044: ("DS", "Grid Pitch"),
    0x00187046: ("IS", "Grid Aspect Ratio"),
    0x00187048: ("DS", "Grid Period"),
    0x0018704C: ("DS", "Grid Focal Distance"),
    0x00187050: ("LT", "Filter Material"),
    0x00187052: ("DS", "Filter Thickness Minimum"),
    0x00187054: ("DS", "Filter Thickness Maximum"),
    0x00187060: ("CS", "Exposure Control Mode"),
    0x00187062: ("LT", "Exposure Control Mode Description"),
    0x00187064: ("CS", "Exposure Status"),
    0x00187065: ("DS", "Phototimer Setting"),
    0x0020000D: ("UI", "Study Instance UID"),
    0x0020000E: ("UI", "Series Instance UID"),
    0x00200010: ("SH", "Study ID"),
    0x00200011: ("IS", "Series Number"),
    0x00200012: ("IS", "Acquisition Number"),
    0x00200013: ("IS", "Instance Number"),
    0x00200014: ("IS", "Isotope Number"),
    0x00200015: ("IS", "Phase Number"),
    0x00200016: ("IS", "Interval Number"),
    0x00200017: ("IS", "Time Slot Number"),
    0x00200018: ("IS", "Angle Number"),
    0x00200020: ("CS", "Patient Orientation"),
    0x00200022: ("US", "Overlay Number"),
    0x00200024: ("US", "Curve Number"),
    0x00200030: ("DS", "Image Position"),
    0x00200032: ("DS", "Image Position (Patient)"),
    0x00200037: ("DS", "Image Orientation (Patient)"),
    0x00200050: ("DS", "Location"),
    0x00200052: ("UI", "Frame of Reference UID"),
    0x00200060: ("CS", "Laterality"),
    0x00200070: ("LO", "Image Geometry Type"),
    0x00200080: ("UI", "Masking Image"),
    0x00200100: ("IS", "Temporal Position Identifier"),
    0x00200105: ("IS", "Number of Temporal Positions"),
    0x00200110: ("DS", "Temporal Resolution"),
    0x00201000: ("IS", "Series in Study"),
    0x00201002: ("IS", "Images in Acquisition"),
    0x00201004: ("IS", "Acquisitions in Study"),
    0x00201040: ("LO", "Position Reference Indicator"),
    0x00201041: ("DS", "Slice Location"),
    0x00201070: ("IS", "Other Study Numbers"),
    0x00201200: ("IS", "Number of Patient Related Studies"),
    0x00201202: ("IS", "Number of Patient Related Series"),
    0x00201204: ("IS", "Number of Patient Related Instances"),
    0x00201206: ("IS", "Number of Study Related Series"),
    0x00201208: ("IS", "Number of Study Related Instances"),
    0x00204000: ("LT", "Image Comments"),
    0x00280002: ("US", "Samples per Pixel"),
    0x00280004: ("CS", "Photometric Interpretation"),
    0x00280006: ("US", "Planar Configuration"),
    0x00280008: ("IS", "Number of Frames"),
    0x00280009: ("AT", "Frame Increment Pointer"),
    0x00280010: ("US", "Rows"),
    0x00280011: ("US", "Columns"),
    0x00280030: ("DS", "Pixel Spacing"),
    0x00280031: ("DS", "Zoom Factor"),
    0x00280032: ("DS", "Zoom Center"),
    0x00280034: ("IS", "Pixel Aspect Ratio"),
    0x00280051: ("CS", "Corrected Image"),
    0x00280100: ("US", "Bits Allocated"),
    0x00280101: ("US", "Bits Stored"),
    0x00280102: ("US", "High Bit"),
    0x00280103: ("US", "Pixel Representation"),
    0x00280106: ("US", "Smallest Image Pixel Value"),
    0x00280107: ("US", "Largest Image Pixel Value"),
    0x00280108: ("US", "Smallest Pixel Value in Series"),
    0x00280109: ("US", "Largest Pixel Value in Series"),
    0x00280120: ("US", "Pixel Padding Value"),
    0x00280300: ("CS", "Quality Control Image"),
    0x00280301: ("CS", "Burned In Annotation"),
    0x00281040: ("CS", "Pixel Intensity Relationship"),
    0x00281041: ("SS", "Pixel Intensity Relationship Sign"),
    0x00281050: ("DS", "Window Center"),
    0x00281051: ("DS", "Window Width"),
    0x00281052: ("DS", "Rescale Intercept"),
    0x00281053: ("DS", "Rescale Slope"),
    0x00281054: ("LO", "Rescale Type"),
    0x00281055: ("LO", "Window Center & Width Explanation"),
    0x00281101: ("US", "Red Palette Color Lookup Table Descriptor"),
    0x00281102: ("US", "Green Palette Color Lookup Table Descriptor"),
    0x00281103: ("US", "Blue Palette Color Lookup Table Descriptor"),
    0x00281104: ("US", "Alpha Palette Color Lookup Table Descriptor"),
    0x00281201: ("OW", "Red Palette Color Lookup Table Data"),
    0x00281202: ("OW", "Green Palette Color Lookup Table Data"),
    0x00281203: ("OW", "Blue Palette Color Lookup Table Data"),
    0x00281204: ("OW", "Alpha Palette Color Lookup Table Data"),
    0x00282110: ("CS", "Lossy Image Compression"),
    0x00283000: ("SQ", "Modality LUT Sequence"),
    0x00283002: ("US", "LUT Descriptor"),
    0x00283003: ("LO", "LUT Explanation"),
    0x00283004: ("LO", "Modality LUT Type"),
    0x00283006: ("US", "LUT Data"),
    0x00283010: ("SQ", "VOI LUT Sequence"),
    0x0032000A: ("CS", "Study Status ID"),
    0x0032000C: ("CS", "Study Priority ID"),
    0x00320012: ("LO", "Study ID Issuer"),
    0x00320032: ("DA", "Study Verified Date"),
    0x00320033: ("TM", "Study Verified Time"),
    0x00320034: ("DA", "Study Read Date"),
    0x00320035: ("TM", "Study Read Time"),
    0x00321000: ("DA", "Scheduled Study Start Date"),
    0x00321001: ("TM", "Scheduled Study Start Time"),
    0x00321010: ("DA", "Scheduled Study Stop Date"),
    0x00321011: ("TM", "Scheduled Study Stop Time"),
    0x00321020: ("LO", "Scheduled Study Location"),
    0x00321021: ("AE", "Scheduled Study Location AE Title"),
    0x00321030: ("LO", "Reason for Study"),
    0x00321032: ("PN", "Requesting Physician"),
    0x00321033: ("LO", "Requesting Service"),
    0x00321040: ("DA", "Study Arrival Date"),
    0x00321041: ("TM", "Study Arrival Time"),
    0x00321050: ("DA", "Study Completion Date"),
    0x00321051: ("TM", "Study Completion Time"),
    0x00321055: ("CS", "Study Component Status ID"),
    0x00321060: ("LO", "Requested Procedure Description"),
    0x00321064: ("SQ", "Requested Procedure Code Sequence"),
    0x00321070: ("LO", "Requested Contrast Agent"),
    0x00324000: ("LT", "Study Comments"),
    0x00400001: ("AE", "Scheduled Station AE Title"),
    0x00400002: ("DA", "Scheduled Procedure Step Start Date"),
    0x00400003: ("TM", "Scheduled Procedure Step Start Time"),
    0x00400004: ("DA", "Scheduled Procedure Step End Date"),
    0x00400005: ("TM", "Scheduled Procedure Step End Time"),
    0x00400006: ("PN", "Scheduled Performing Physician's Name"),
    0x00400007: ("LO", "Scheduled Procedure Step Description"),
    0x00400008: ("SQ", "Scheduled Protocol Code Sequence"),
    0x00400009: ("SH", "Scheduled Procedure Step ID"),
    0x00400010: ("SH", "Scheduled Station Name"),
    0x00400011: ("SH", "Scheduled Procedure Step Location"),
    0x00400012: ("LO", "Pre-Medication"),
    0x00400020: ("CS", "Scheduled Procedure Step Status"),
    0x00400100: ("SQ", "Scheduled Procedure Step Sequence"),
    0x00400220: ("SQ", "Referenced Non-Image Composite SOP Instance Sequence"),
    0x00400241: ("AE", "Performed Station AE Title"),
    0x00400242: ("SH", "Performed Station Name"),
    0x00400243: ("SH", "Performed Location"),
    0x00400244: ("DA", "Performed Procedure Step Start Date"),
    0x00400245: ("TM", "Performed Procedure Step Start Time"),
    0x00400250: ("DA", "Performed Procedure Step End Date"),
    0x00400251: ("TM", "Performed Procedure Step End Time"),
    0x00400252: ("CS", "Performed Procedure Step Status"),
    0x00400253: ("SH", "Performed Procedure Step ID"),
    0x00400254: ("LO", "Performed Procedure Step Description"),
    0x00400255: ("LO", "Performed Procedure Type Description"),
    0x00400260: ("SQ", "Performed Protocol Code Sequence"),
    0x00400270: ("SQ", "Scheduled Step Attributes Sequence"),
    0x00400275: ("SQ", "Request Attributes Sequence"),
    0x00400280: ("ST", "Comments on the Performed Procedure Step"),
    0x00400293: ("SQ", "Quantity Sequence"),
    0x00400294: ("DS", "Quantity"),
    0x00400295: ("SQ", "Measuring Units Sequence"),
    0x00400296: ("SQ", "Billing Item Sequence"),
    0x00400300: ("US", "Total Time of Fluoroscopy"),
    0x00400301: ("US", "Total Number of Exposures"),
    0x00400302: ("US", "Entrance Dose"),
    0x00400303: ("US", "Exposed Area"),
    0x00400306: ("DS", "Distance Source to Entrance"),
    0x00400307: ("DS", "Distance Source to Support"),
    0x00400310: ("ST", "Comments on Radiation Dose"),
    0x00400312: ("DS", "X-Ray Output"),
    0x00400314: ("DS", "Half Value Layer"),
    0x00400316: ("DS", "Organ Dose"),
    0x00400318: ("CS", "Organ Exposed"),
    0x00400320: ("SQ", "Billing Procedure Step Sequence"),
    0x00400321: ("SQ", "Film Consumption Sequence"),
    0x00400324: ("SQ", "Billing Supplies and Devices Sequence"),
    0x00400330: ("SQ", "Referenced Procedure Step Sequence"),
    0x00400340: ("SQ", "Performed Series Sequence"),
    0x00400400: ("LT", "Comments on the Scheduled Procedure Step"),
    0x0040050A: ("LO", "Specimen Accession Number"),
    0x00400550: ("SQ", "Specimen Sequence"),
    0x00400551: ("LO", "Specimen Identifier"),
    0x00400555: ("SQ", "Acquisition Context Sequence"),
    0x00400556: ("ST", "Acquisition Context Description"),
    0x0040059A: ("SQ", "Specimen Type Code Sequence"),
    0x004006FA: ("LO", "Slide Identifier"),
    0x0040071A: ("SQ", "Image Center Point Coordinates Sequence"),
    0x0040072A: ("DS", "X Offset in Slide Coordinate System"),
    0x0040073A: ("DS", "Y Offset in Slide Coordinate System"),
    0x0040074A: ("DS", "Z Offset in Slide Coordinate System"),
    0x004008D8: ("SQ", "Pixel Spacing Sequence"),
    0x004008DA: ("SQ", "Coordinate System Axis Code Sequence"),
    0x004008EA: ("SQ", "Measurement Units Code Sequence"),
    0x00401001: ("SH", "Requested Procedure ID"),
    0x00401002: ("LO", "Reason for the Requested Procedure"),
    0x00401003: ("SH", "Requested Procedure Priority"),
    0x00401004: ("LO", "Patient Transport Arrangements"),
    0x00401005: ("LO", "Requested Procedure Location"),
    0x00401006: ("SH", "Placer Order Number / Procedure"),
    0x00401007: ("SH", "Filler Order Number / Procedure"),
    0x00401008: ("LO", "Confidentiality Code"),
    0x00401009: ("SH", "Reporting Priority"),
    0x00401010: ("PN", "Names of Intended Recipients of Results"),
    0x00401400: ("LT", "Requested Procedure Comments"),
    0x00402001: ("LO", "Reason for the Imaging Service Request"),
    0x00402004: ("DA", "Issue Date of Imaging Service Request"),
    0x00402005: ("TM", "Issue Time of Imaging Service Request"),
    0x00402006: ("SH", "Placer Order Number / Imaging Service Request (Retired)"),
    0x00402007: ("SH", "Filler Order Number / Imaging Service Request (Retired)"),
    0x00402008: ("PN", "Order Entered By"),
    0x00402009: ("SH", "Order Enterer's Location"),
    0x00402010: ("SH", "Order Callback Phone Number"),
    0x00402016: ("LO", "Placer Order Number / Imaging Service Request"),
    0x00402017: ("LO", "Filler Order Number / Imaging Service Request"),
    0x00402400: ("LT", "Imaging Service Request Comments"),
    0x00403001: ("LO", "Confidentiality Constraint on Patient Data Description"),
    0x00408302: ("DS", "Entrance Dose in mGy"),
    0x0040A010: ("CS", "Relationship Type"),
    0x0040A027: ("LO", "Verifying Organization"),
    0x0040A030: ("DT", "Verification Date Time"),
    0x0040A032: ("DT", "Observation Date Time"),
    0x0040A040: ("CS", "Value Type"),
    0x0040A043: ("SQ", "Concept Name Code Sequence"),
    0x0040A050: ("CS", "Continuity Of Content"),
    0x0040A073: ("SQ", "Verifying Observer Sequence"),
    0x0040A075: ("PN", "Verifying Observer Name"),
    0x0040A088: ("SQ", "Verifying Observer Identification Code Sequence"),
    0x0040A0B0: ("US", "Referenced Waveform Channels"),
    0x0040A120: ("DT", "DateTime"),
    0x0040A121: ("DA", "Date"),
    0x0040A122: ("TM", "Time"),
    0x0040A123: ("PN", "Person Name"),
    0x0040A124: ("UI", "UID"),
    0x0040A130: ("CS", "Temporal Range Type"),
    0x0040A132: ("UL", "Referenced Sample Positions"),
    0x0040A136: ("US", "Referenced Frame Numbers"),
    0x0040A138: ("DS", "Referenced Time Offsets"),
    0x0040A13A: ("DT", "Referenced DateTime"),
    0x0040A160: ("UT", "Text Value"),
    0x0040A168: ("SQ", "Concept Code Sequence"),
    0x0040A180: ("US", "Annotation Group Number"),
    0x0040A195: ("SQ", "Modifier Code Sequence"),
    0x0040A300: ("SQ", "Measured Value Sequence"),
    0x0040A30A: ("DS", "Numeric Value"),
    0x0040A360: ("SQ", "Predecessor Documents Sequence"),
    0x0040A370: ("SQ", "Referenced Request Sequence"),
    0x0040A372: ("SQ", "Performed Procedure Code Sequence"),
    0x0040A375: ("SQ", "Current Requested Procedure Evidence Sequence"),
    0x0040A385: ("SQ", "Pertinent Other Evidence Sequence"),
    0x0040A491: ("CS", "Completion Flag"),
    0x0040A492: ("LO", "Completion Flag Description"),
    0x0040A493: ("CS", "Verification Flag"),
    0x0040A504: ("SQ", "Content Template Sequence"),
    0x0040A525: ("SQ", "Identical Documents Sequence"),
    0x0040A730: ("SQ", "Content Sequence"),
    0x0040B020: ("SQ", "Waveform Annotation Sequence"),
    0x0040DB00: ("CS", "Template Identifier"),
    0x0040DB06: ("DT", "Template Version"),
    0x0040DB07: ("DT", "Template Local Version"),
    0x0040DB0B: ("CS", "Template Extension Flag"),
    0x0040DB0C: ("UI", "Template Extension Organization UID"),
    0x0040DB0D: ("UI", "Template Extension Creator UID"),
    0x0040DB73: ("UL", "Referenced Content Item Identifier"),
    0x00540011: ("US", "Number of Energy Windows"),
    0x00540012: ("SQ", "Energy Window Information Sequence"),
    0x00540013: ("SQ", "Energy Window Range Sequence"),
    0x00540014: ("DS", "Energy Window Lower Limit"),
    0x00540015: ("DS", "Energy Window Upper Limit"),
    0x00540016: ("SQ", "Radiopharmaceutical Information Sequence"),
    0x00540017: ("IS", "Residual Syringe Counts"),
    0x00540018: ("SH", "Energy Window Name"),
    0x00540020: ("US", "Detector Vector"),
    0x00540021: ("US", "Number of Detectors"),
    0x00540022: ("SQ", "Detector Information Sequence"),
    0x00540030: ("US", "Phase Vector"),
    0x00540031: ("US", "Number of Phases"),
    0x00540032: ("SQ", "Phase Information Sequence"),
    0x00540033: ("US", "Number of Frames in Phase"),
    0x00540036: ("IS", "Phase Delay"),
    0x00540038: ("IS", "Pause Between Frames"),
    0x00540039: ("CS", "Phase Description"),
    0x00540050: ("US", "Rotation Vector"),
    0x00540051: ("US", "Number of Rotations"),
    0x00540052: ("SQ", "Rotation Information Sequence"),
    0x00540053: ("US", "Number of Frames in Rotation"),
    0x00540060: ("US", "R-R Interval Vector"),
    0x00540061: ("US", "Number of R-R Intervals"),
    0x00540062: ("SQ", "Gated Information Sequence"),
    0x00540063: ("SQ", "Data Information Sequence"),
    0x00540070: ("US", "Time Slot Vector"),
    0x00540071: ("US", "Number of Time Slots"),
    0x00540072: ("SQ", "Time Slot Information Sequence"),
    0x00540073: ("DS", "Time Slot Time"),
    0x00540080: ("US", "Slice Vector"),
    0x00540081: ("US", "Number of Slices"),
    0x00540090: ("US", "Angular View Vector"),
    0x00540100: ("US", "Time Slice Vector"),
    0x00540101: ("US", "Number of Time Slices"),
    0x00540200: ("DS", "Start Angle"),
    0x00540202: ("CS", "Type of Detector Motion"),
    0x00540210: ("IS", "Trigger Vector"),
    0x00540211: ("US", "Number of Triggers in Phase"),
    0x00540220: ("SQ", "View Code Sequence"),
    0x00540222: ("SQ", "View Modifier Code Sequence"),
    0x00540300: ("SQ", "Radionuclide Code Sequence"),
    0x00540302: ("SQ", "Administration Route Code Sequence"),
    0x00540304: ("SQ", "Radiopharmaceutical Code Sequence"),
    0x00540306: ("SQ", "Calibration Data Sequence"),
    0x00540308: ("US", "Energy Window Number"),
    0x00540400: ("SH", "Image ID"),
    0x00540410: ("SQ", "Patient Orientation Code Sequence"),
    0x00540412: ("SQ", "Patient Orientation Modifier Code Sequence"),
    0x00540414: ("SQ", "Patient Gantry Relationship Code Sequence"),
    0x00540500: ("CS", "Slice Progression Direction"),
    0x00541000: ("CS", "Series Type"),
    0x00541001: ("CS", "Units"),
    0x00541002: ("CS", "Counts Source"),
    0x00541004: ("CS", "Reprojection Method"),
    0x00541100: ("CS", "Randoms Correction Method"),
    0x00541101: ("LO", "Attenuation Correction Method"),
    0x00541102: ("CS", "Decay Correction"),
    0x00541103: ("LO", "Reconstruction Method"),
    0x00541104: ("LO", "Detector Lines of Response Used"),
    0x00541105: ("LO", "Scatter Correction Method"),
    0x00541200: ("DS", "Axial Acceptance"),
    0x00541201: ("IS", "Axial Mash"),
    0x00541202: ("IS", "Transverse Mash"),
    0x00541203: ("DS", "Detector Element Size"),
    0x00541210: ("DS", "Coincidence Window Width"),
    0x00541220: ("CS", "Secondary Counts Type"),
    0x00541300: ("DS", "Frame Reference Time"),
    0x00541310: ("IS", "Primary (Prompts) Counts Accumulated"),
    0x00541311: ("IS", "Secondary Counts Accumulated"),
    0x00541320: ("DS", "Slice Sensitivity Factor"),
    0x00541321: ("DS", "Decay Factor"),
    0x00541322: ("DS", "Dose Calibration Factor"),
    0x00541323: ("DS", "Scatter Fraction Factor"),
    0x00541324: ("DS", "Dead Time Factor"),
    0x00541330: ("US", "Image Index"),
    0x00541400: ("CS", "Counts Included"),
    0x00541401: ("CS", "Dead Time Correction Flag"),
    0x20300010: ("US", "Annotation Position"),
    0x20300020: ("LO", "Text string"),
    0x20500010: ("SQ", "Presentation LUT Sequence"),
    0x20500020: ("CS", "Presentation LUT Shape"),
    0x20500500: ("SQ", "Referenced Presentation LUT Sequence"),
    0x30020002: ("SH", "RT Image Label"),
    0x30020003: ("LO", "RT Image Name"),
    0x30020004: ("ST", "RT Image Description"),
    0x3002000A: ("CS", "Reported Values Origin"),
    0x3002000C: ("CS", "RT Image Plane"),
    0x3002000D: ("DS", "X-Ray Image Receptor Translation"),
    0x3002000E: ("DS", "X-Ray Image Receptor Angle"),
    0x30020010: ("DS", "RT Image Orientation"),
    0x30020011: ("DS", "Image Plane Pixel Spacing"),
    0x30020012: ("DS", "RT Image Position"),
    0x30020020: ("SH", "Radiation Machine Name"),
    0x30020022: ("DS", "Radiation Machine SAD"),
    0x30020024: ("DS", "Radiation Machine SSD"),
    0x30020026: ("DS", "RT Image SID"),
    0x30020028: ("DS", "Source to Reference Object Distance"),
    0x30020029: ("IS", "Fraction Number"),
    0x30020030: ("SQ", "Exposure Sequence"),
    0x30020032: ("DS", "Meterset Exposure"),
    0x30020034: ("DS", "Diaphragm Position"),
    0x30020040: ("SQ", "Fluence Map Sequence"),
    0x30020041: ("CS", "Fluence Data Source"),
    0x30020042: ("DS", "Fluence Data Scale"),
    0x30040001: ("CS", "DVH Type"),
    0x30040002: ("CS", "Dose Units"),
    0x30040004: ("CS", "Dose Type"),
    0x30040006: ("LO", "Dose Comment"),
    0x30040008: ("DS", "Normalization Point"),
    0x3004000A: ("CS", "Dose Summation Type"),
    0x3004000C: ("DS", "Grid Frame Offset Vector"),
    0x3004000E: ("DS", "Dose Grid Scaling"),
    0x30040010: ("SQ", "RT Dose ROI Sequence"),
    0x30040012: ("DS", "Dose Value"),
    0x30040014: ("CS", "Tissue Heterogeneity Correction"),
    0x30040040: ("DS", "DVH Normalization Point"),
    0x30040042: ("DS", "DVH Normalization Dose Value"),
    0x30040050: ("SQ", "DVH Sequence"),
    0x30040052: ("DS", "DVH Dose Scaling"),
    0x30040054: ("CS", "DVH Volume Units"),
    0x30040056: ("IS", "DVH Number of Bins"),
    0x30040058: ("DS", "DVH Data"),
    0x30040060: ("SQ", "DVH Referenced ROI Sequence"),
    0x30040062: ("CS", "DVH ROI Contribution Type"),
    0x30040070: ("DS", "DVH Minimum Dose"),
    0x30040072: ("DS", "DVH Maximum Dose"),
    0x30040074: ("DS", "DVH Mean Dose"),
    0x300A00B3: ("CS", "Primary Dosimeter Unit"),
    0x300A00F0: ("IS", "Number of Blocks"),
    0x300A011E: ("DS", "Gantry Angle"),
    0x300A0120: ("DS", "Beam Limiting Device Angle"),
    0x300A0122: ("DS", "Patient Support Angle"),
    0x300A0128: ("DS", "Table Top Vertical Position"),
    0x300A0129: ("DS", "Table Top Longitudinal Position"),
    0x300A012A: ("DS", "Table Top Lateral Position"),
    0x300C0006: ("IS", "Referenced Beam Number"),
    0x300C0008: ("DS", "Start Cumulative Meterset Weight"),
    0x300C0022: ("IS", "Referenced Fraction Group Number"),
    0x7FE00010: ("OX", "Pixel Data"),
    0xFFFEE000: ("DL", "Item"),
    0xFFFEE00D: ("DL", "Item Delimitation Item"),
    0xFFFEE0DD: ("DL", "Sequence Delimitation Item"),
})
